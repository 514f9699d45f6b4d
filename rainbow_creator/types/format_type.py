from enum import Enum
import numpy as np
class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

default_format_dtypes = {
    FormatType.INT: np.int64,
    FormatType.FLOAT: np.float64,
    FormatType.PERCENTAGE: np.float64,
}

HUE_360 = 360
ALPHA_OPAQUE = 1.0
HEX_24BIT_MAX = 0xFFFFFF
