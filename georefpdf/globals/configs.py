
#---------------------
# COORDINATE SYSTEMS
#---------------------
# web map widgets report their view extent in web mercator
SOURCE_CRS = "EPSG:3857"
# georeferenced output is always tagged WGS 84
TARGET_CRS = "EPSG:4326"

#---------------------
# OVERLAY CANVAS
#---------------------
HIDPI_RATIO = 2.0
OPACITY_SLIDER_MAX = 100

#---------------------
# CONFIGURATION FILES
#---------------------
CONFIG_FILENAME = "georefpdf.yml"

#--------------------
# Export Names
#--------------------
OUTPUT_SUFFIX = "_Geo"
LOG_FILE_PREFIX = "georefpdf"
