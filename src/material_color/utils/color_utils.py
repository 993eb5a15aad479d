# color_utils.py – ARGB <-> linear RGB <-> XYZ <-> L*a*b* conversions
#   - ARGB is a packed 0xAARRGGBB unsigned int
#   - linear RGB and XYZ are on a 0..100 scale
#   - L* is CIE 1976 lightness, which is also the HCT tone

from __future__ import annotations

from .math_utils import clamp_int, matrix_multiply, round_half_up

Argb = int

# --- constants ---------------------------------------------------------------
SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65 = (95.047, 100.0, 108.883)

_LAB_E = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


# --- packing -----------------------------------------------------------------
def argb_from_rgb(red: int, green: int, blue: int) -> Argb:
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def argb_from_linrgb(linrgb) -> Argb:
    r = delinearized(linrgb[0])
    g = delinearized(linrgb[1])
    b = delinearized(linrgb[2])
    return argb_from_rgb(r, g, b)


def alpha_from_argb(argb: Argb) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: Argb) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: Argb) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: Argb) -> int:
    return argb & 255


def is_opaque(argb: Argb) -> bool:
    return alpha_from_argb(argb) >= 255


# --- XYZ / Lab ---------------------------------------------------------------
def argb_from_xyz(x: float, y: float, z: float) -> Argb:
    lin_r, lin_g, lin_b = matrix_multiply((x, y, z), XYZ_TO_SRGB)
    return argb_from_rgb(delinearized(lin_r), delinearized(lin_g), delinearized(lin_b))


def xyz_from_argb(argb: Argb) -> list[float]:
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), SRGB_TO_XYZ)


def argb_from_lab(l: float, a: float, b: float) -> Argb:
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = _lab_invf(fx) * WHITE_POINT_D65[0]
    y = _lab_invf(fy) * WHITE_POINT_D65[1]
    z = _lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz(x, y, z)


def lab_from_argb(argb: Argb) -> list[float]:
    x, y, z = xyz_from_argb(argb)
    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])
    return [116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)]


# --- L* ----------------------------------------------------------------------
def argb_from_lstar(lstar: float) -> Argb:
    """Gray ARGB whose L* is `lstar`."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: Argb) -> float:
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def y_from_lstar(lstar: float) -> float:
    """L* (0..100) to relative luminance Y (0..100)."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    return _lab_f(y / 100.0) * 116.0 - 16.0


def linearized(rgb_component: float) -> float:
    """8-bit sRGB channel (0..255) to linear channel (0..100)."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """Linear channel (0..100) to 8-bit sRGB channel (0..255)."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round_half_up(value * 255.0))


def white_point_d65() -> tuple[float, float, float]:
    return WHITE_POINT_D65


# ---- internals ----
def _lab_f(t: float) -> float:
    if t > _LAB_E:
        return t ** (1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_E:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA
