from .rgba import ColorRGBA

WHITE = ColorRGBA.from_argb(0xFFFFFFFF)
BLACK = ColorRGBA.from_argb(0xFF000000)
YELLOW = ColorRGBA.from_argb(0xFFFFFF00)
GREEN = ColorRGBA.from_argb(0xFF00FF00)
GRAY = ColorRGBA.from_argb(0xFF888888)
LIGHT_GRAY = ColorRGBA.from_argb(0xFFCCCCCC)
CYAN = ColorRGBA.from_argb(0xFF00FFFF)
MAGENTA = ColorRGBA.from_argb(0xFFFF00FF)
RED = ColorRGBA.from_argb(0xFFFF0000)
TRANSPARENT = ColorRGBA.from_argb(0x00000000)

BRAND_BLUE = ColorRGBA.from_argb(0xFF4285F4)
BRAND_PURPLE = ColorRGBA.from_argb(0xFF9B72CB)
BRAND_ROSE = ColorRGBA.from_argb(0xFFD96570)
