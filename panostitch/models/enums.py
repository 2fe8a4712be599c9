from enum import Enum

class ProjectionType(Enum):
    PERSPECTIVE = "perspective"
    CYLINDRICAL = "cylindrical"
    SPHERICAL = "spherical"
    FISHEYE = "fisheye"
    STEREOGRAPHIC = "stereographic"
    COMPRESSED_RECTILINEAR = "rectilinear"  # CLI name is the short one
    PANINI = "panini"
    MERCATOR = "mercator"
    TRANSVERSE_MERCATOR = "transverse-mercator"

class MatchingType(Enum):
    AUTO = "auto"           # pairwise matching
    SINGLE_PANO = "single"  # assume all images form one pano
    NONE = "none"           # skip matching

class WaveCorrectionType(Enum):
    OFF = "off"
    AUTO = "auto"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
