#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 4096

EPS = 1e-12                        # Floating-point precision and division-by-zero safety
ACHROMATIC_CHROMA_EPS = 1e-4       # OKLCH chroma below which a color is treated as gray

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
PERCENT = 100.0                    # Percentage scale used by HSL/HSV/CMYK and alpha
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle degrees (shortest-arc math)
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSV

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# OKLab (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),  # Long-wavelength (L) cone response
    (0.2119034982, 0.6806995451, 0.1073969566),  # Medium-wavelength (M) cone response
    (0.0883024619, 0.2817188376, 0.6299787005),  # Short-wavelength (S) cone response
)

# LMS' to Lab (Perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),  # 'a' (green-red)
    (0.0259040371, 0.7827717662, -0.8086757660),  # 'b' (blue-yellow)
)

# OKLab to LMS' (Inverse stage part 1; L coefficient is always 1)
M2_OKLAB_INV = (
    (0.3963377774, 0.2158037573),      # 'a' and 'b' contributions to L'
    (-0.1055613458, -0.0638541728),    # 'a' and 'b' contributions to M'
    (-0.0894841775, -1.2914855480),    # 'a' and 'b' contributions to S'
)

# LMS to linear sRGB (Inverse stage part 2)
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),    # Linear red
    (-1.2684380046, 2.6097574011, -0.3413193965),   # Linear green
    (-0.0041960863, -0.7034186147, 1.7076147010),   # Linear blue
)

# ==========================================
# Gamut Mapping
# ==========================================

RGB_CLAMP_TOLERANCE_LOWER = -0.5         # Lowest unrounded channel value that still rounds into gamut
RGB_CLAMP_TOLERANCE_UPPER = 255.5        # Highest unrounded channel value that still rounds into gamut
GAMUT_MAP_MAX_ITERATIONS = 32            # Binary search steps for chroma-based gamut mapping
GAMUT_MAP_EPS = 1e-4                     # Chroma interval at which the search stops

# ==========================================
# Contrast (WCAG 2.x and APCA)
# ==========================================

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_AAA = 7.0                     # Enhanced contrast for normal text (Level AAA)
WCAG_AA = 4.5                      # Minimum contrast for normal text (Level AA)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)

WCAG_LEVELS = (
    (WCAG_AAA, "AAA"),
    (WCAG_AA, "AA"),
    (WCAG_AA_LARGE, "AA Large"),
)
WCAG_FAIL = "Fail"

# APCA 0.0.98G constants (Source: https://github.com/Myndex/apca-w3)
APCA_R = 0.2126729                 # Red coefficient for APCA screen luminance
APCA_G = 0.7151522                 # Green coefficient for APCA screen luminance
APCA_B = 0.0721750                 # Blue coefficient for APCA screen luminance
APCA_TRC_EXP = 2.4                 # Simple exponent applied to each encoded channel
APCA_NORM_TXT = 0.57               # Text exponent, dark text on light background
APCA_NORM_BG = 0.56                # Background exponent, dark text on light background
APCA_REV_TXT = 0.62                # Text exponent, light text on dark background
APCA_REV_BG = 0.65                 # Background exponent, light text on dark background
APCA_SCALE = 1.14                  # Output scale
APCA_OFFSET = 0.027                # Output offset applied toward zero
APCA_LOW_CLIP = 0.1                # |SAPC| below this reads as no contrast
APCA_LC_SCALE = 100.0              # SAPC to Lc

APCA_LEVELS = (
    (75.0, "Preferred"),
    (60.0, "Body"),
    (45.0, "Large"),
    (30.0, "UI"),
)
APCA_FAIL = "Fail"

# Contrast repair search
CONTRAST_FIX_MAX_ITERATIONS = 32         # Binary search steps over OKLCH lightness
CONTRAST_FIX_EPS = 1e-3                  # Lightness interval at which the search stops
CONTRAST_FIX_CHROMA_FALLOFF = 0.3        # Chroma attenuation per unit of lightness change
LIGHT_BACKGROUND_LUMINANCE = 0.5         # Backgrounds above this get darker foregrounds

# ==========================================
# Color Vision Deficiency (row-major 3x3 over linear sRGB)
# ==========================================

SIM_MATRICES = {
    "normal": (
        1.0, 0.0, 0.0,
        0.0, 1.0, 0.0,
        0.0, 0.0, 1.0,
    ),
    "deuteranopia": (
        0.367, 0.861, -0.228,
        0.280, 0.673, 0.047,
        -0.012, 0.043, 0.969,
    ),
    "protanopia": (
        0.152, 1.053, -0.205,
        0.115, 0.786, 0.099,
        -0.004, -0.048, 1.052,
    ),
    "tritanopia": (
        1.256, -0.077, -0.179,
        -0.079, 0.931, 0.148,
        0.005, 0.691, 0.304,
    ),
    "achromatopsia": (
        0.299, 0.587, 0.114,
        0.299, 0.587, 0.114,
        0.299, 0.587, 0.114,
    ),
    "deuteranomaly": (
        0.531, 0.566, -0.097,
        0.176, 0.764, 0.060,
        -0.004, 0.040, 0.964,
    ),
}

SIM_TYPES = {
    "normal": ("Normal Vision", "Full color perception"),
    "deuteranopia": ("Deuteranopia", "Green-blind, ~6% of males"),
    "protanopia": ("Protanopia", "Red-blind, ~2% of males"),
    "tritanopia": ("Tritanopia", "Blue-yellow blind, ~0.01%"),
    "achromatopsia": ("Achromatopsia", "Complete color blindness, very rare"),
    "deuteranomaly": ("Deuteranomaly", "Reduced green sensitivity, ~5% of males"),
}

# ==========================================
# Tint / Shade Scale
# ==========================================

SCALE_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
SCALE_STEP_DIVISOR = 1000.0        # step -> t in (0, 1)
SCALE_L_MAX = 0.97                 # Lightness at t = 0 (near white)
SCALE_L_MIN = 0.10                 # Lightness at t = 1 (near black)
SCALE_L_GAMMA = 0.85               # Power curve exponent for midtone spacing
SCALE_L_CLAMP = (0.02, 0.98)       # Final lightness bounds
SCALE_C_CAP = 0.32                 # sRGB-safe ceiling for the base chroma
SCALE_C_CLAMP = (0.0, 0.37)        # Final chroma bounds
SCALE_TENT_FACTOR = 4.0            # 4t(1-t) peaks at 1.0 for t = 0.5
SCALE_SKEW_BASE = 1.1              # Chroma skew at the skew center
SCALE_SKEW_SLOPE = 0.3             # Skew falloff per unit of |t - center|
SCALE_SKEW_CENTER = 0.4            # Skew center (step 400)

# ==========================================
# Palette Scoring
# ==========================================

SCORE_MAX = 100.0
SCORE_AA_RATIO = 4.5                # Standalone readability bar for the accessibility score
SCORE_CHROMA_DEV_MAX = 0.15         # Chroma std-dev that scores zero harmony
SCORE_UNIQUENESS_SCALE = 500.0      # Mean OKLab distance multiplier
SCORE_MIN_COLORS = 2

# ==========================================
# Utility Colors
# ==========================================

UTILITY_ROLES = ("info", "success", "warning", "error", "neutral", "focus")

UTILITY_DEFS = {
    "info": ("Info", "Informational messages, tooltips, hints", 231.0),
    "success": ("Success", "Confirmations, completed states, positive actions", 142.0),
    "warning": ("Warning", "Cautions, pending states, non-critical alerts", 85.0),
    "error": ("Error", "Destructive actions, validation failures, danger", 25.0),
    "neutral": ("Neutral", "Disabled states, placeholders, secondary content", 0.0),
    "focus": ("Focus", "Keyboard focus rings, matches primary palette color", 0.0),
}

# Canonical hue center and acceptance arc (degrees) per semantic role
ROLE_HUES = {
    "info": (220.0, 60.0),
    "success": (148.0, 50.0),
    "warning": (75.0, 35.0),
    "error": (27.0, 35.0),
}

UTILITY_DEFAULT_L = 0.55            # Average lightness assumed for an empty palette
UTILITY_DEFAULT_C = 0.12            # Average chroma assumed for an empty palette
UTILITY_DEFAULT_PRIMARY = (0.55, 0.15, 230.0)

UTILITY_LIGHT_PALETTE_L = 0.68      # Above: pull utility lightness down
UTILITY_DARK_PALETTE_L = 0.38       # Below: pull utility lightness up
UTILITY_L_SHIFT = 0.14
UTILITY_TARGET_L = (0.44, 0.64)
UTILITY_C_FACTOR = 0.9
UTILITY_C_FLOOR = 0.04
UTILITY_TARGET_C = (0.10, 0.22)

UTILITY_WEIGHT_HUE = 0.5
UTILITY_WEIGHT_L = 0.3
UTILITY_WEIGHT_C = 0.2

UTILITY_BLEND_DISTANCE = 120.0      # Hue distance at which the nearest palette hue stops pulling
UTILITY_BLEND_MAX = 0.6

WARNING_YELLOW_HUE = 75.0
WARNING_YELLOW_SPREAD = 40.0
WARNING_L_PENALTY = 0.08
WARNING_L_CLAMP = (0.42, 0.62)
WARNING_C_FACTOR = 1.05
WARNING_C_CLAMP = (0.09, 0.20)

ERROR_C_FACTOR = 1.1
ERROR_C_CLAMP = (0.12, 0.24)

NEUTRAL_L_SHIFT = 0.05
NEUTRAL_L_CLAMP = (0.5, 0.68)
NEUTRAL_C_FACTOR = 0.08
NEUTRAL_C_CLAMP = (0.006, 0.035)

FOCUS_L_CLAMP = (0.5, 0.7)
FOCUS_C_CLAMP = (0.12, 0.30)

# ==========================================
# Wide Gamut (Display P3)
# ==========================================

P3_CHROMA_THRESHOLD = 0.25          # OKLCH chroma above which a color is flagged P3-capable
P3_CHROMA_EXPANSION = 1.25          # Chroma multiplier for the expanded preview
P3_CHROMA_CEILING = 0.38            # Approximate P3 chroma ceiling on common hues
P3_LINEAR_TH = 0.0030186            # Linear threshold of the P3 transfer curve

# Linear sRGB to linear Display P3 (D65, row-major)
M_SRGB_TO_P3 = (
    (0.8225, 0.1774, 0.0),
    (0.0332, 0.9669, 0.0),
    (0.0171, 0.0724, 0.9108),
)

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
MAX_STEPS = 1000                   # Gradient step limit
MAX_COUNT = 100                    # Maximum number of colors allowed in batch processing

GRADIENT_SPACES = ("srgb", "srgblinear", "hsl", "oklab", "oklch")

CONVERT_FORMATS = ("hex", "rgb", "hsl", "hsv", "cmyk", "oklab", "oklch", "p3")

# Flags switched on by the inspector's -all
TECH_INFO_KEYS = ("rgb", "hsl", "hsv", "cmyk", "oklab", "oklch", "luminance", "contrast", "apca", "p3")

# ==========================================
# CLI UI
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
