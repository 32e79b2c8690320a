from .schema import IntMathConfig, load_intmath_config
from .layout import VerifyLayout, build_layout

__all__ = [
    "IntMathConfig",
    "VerifyLayout",
    "load_intmath_config",
    "build_layout",
]
