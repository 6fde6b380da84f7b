"""Conversion between color formats and spaces"""
import itertools
import math
from typing import Callable, cast, TypeAlias


# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb-linear.js

_XYZ_TO_LINEAR_SRGB = (
	(  3.2409699419045226,  -1.537383177570094,   -0.4986107602930034  ),
	( -0.9692436362808796,   1.8759675015077202,   0.04155505740717559 ),
	(  0.05563007969699366, -0.20397695888897652,  1.0569715142428786  ),
)

_LINEAR_SRGB_TO_XYZ = (
	( 0.41239079926595934, 0.357584339383878,   0.1804807884018343  ),
	( 0.21263900587151027, 0.715168678767756,   0.07219231536073371 ),
	( 0.01933081871559182, 0.11919477979462598, 0.9505321522496607  ),
)

# The D65 white point is the image of sRGB white, so that white round-trips
# through Lab with a* = b* = 0.
_D65 = cast(
    tuple[float, float, float],
    tuple(sum(row) for row in _LINEAR_SRGB_TO_XYZ),
)

# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/lab.js

_ε = 216 / 24389
_ε3 = 24 / 116
_κ = 24389 / 27

# Chroma below this threshold has a powerless hue.
_ACHROMATIC_CHROMA = 0.02


# --------------------------------------------------------------------------------------


_Vector: TypeAlias = tuple[float, float, float]
_Matrix: TypeAlias = tuple[_Vector, _Vector, _Vector]

Converter: TypeAlias = Callable[..., tuple[float, float, float]]

def _multiply(matrix: _Matrix, vector: _Vector) -> _Vector:
    return cast(
        _Vector,
        tuple(sum(r * c for r, c in zip(row, vector)) for row in matrix)
    )


# --------------------------------------------------------------------------------------
# 24-bit RGB


def clamp_byte(value: float) -> int:
    """
    Round the 24-bit RGB channel half up and clamp it to 0–255. Not-a-numbers
    become 0.
    """
    if math.isnan(value):
        return 0
    return math.floor(min(max(value, 0.0), 255.0) + 0.5)


def rgb256_to_srgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert the given color from 24-bit RGB to sRGB."""
    return cast(_Vector, tuple(map(lambda c: c / 255.0, (r, g, b))))


def srgb_to_rgb256(r: float, g: float, b: float) -> tuple[int, int, int]:
    """
    Convert the given color from sRGB to 24-bit RGB. This conversion is lossy:
    It rounds each channel and clamps out-of-gamut channels to the sRGB gamut.
    """
    return cast(
        tuple[int, int, int],
        tuple(map(lambda c: clamp_byte(c * 255), (r, g, b))),
    )


# --------------------------------------------------------------------------------------
# sRGB and Linear sRGB
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb.js


def srgb_to_linear_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from sRGB to linear sRGB."""
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.04045:
            return value / 12.92

        return math.copysign(math.pow((magnitude + 0.055) / 1.055, 2.4), value)

    return convert(r), convert(g), convert(b)


def linear_srgb_to_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from linear sRGB to sRGB."""
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.0031308:
            return value * 12.92

        return math.copysign(math.pow(magnitude, 1/2.4) * 1.055 - 0.055, value)

    return convert(r), convert(g), convert(b)


def linear_srgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from linear sRGB to XYZ."""
    return _multiply(_LINEAR_SRGB_TO_XYZ, (r, g, b))


# --------------------------------------------------------------------------------------
# CIE Lab and its cylindrical form HCL


def hcl_to_lab(h: float, C: float, L: float) -> tuple[float, float, float]:
    """Convert the given color from HCL to Lab."""
    if math.isnan(h):
        a = b = 0.0
    else:
        a = C * math.cos(h * math.pi / 180)
        b = C * math.sin(h * math.pi / 180)

    return L, a, b


def lab_to_hcl(L: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert the given color from Lab to HCL. Note the order of coordinates,
    which follows the name: hue, chroma, and luminance. The hue of achromatic
    colors is powerless and hence not-a-number.
    """
    if math.fabs(a) < _ACHROMATIC_CHROMA and math.fabs(b) < _ACHROMATIC_CHROMA:
        h = math.nan
    else:
        h = math.atan2(b, a) * 180 / math.pi

    return math.fmod(h + 360, 360), math.sqrt(math.pow(a, 2) + math.pow(b, 2)), L


def lab_to_xyz(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from Lab to XYZ."""
    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = math.pow(fx, 3) if fx > _ε3 else (116 * fx - 16) / _κ
    y = math.pow((L + 16) / 116, 3) if L > _κ * _ε else L / _κ
    z = math.pow(fz, 3) if fz > _ε3 else (116 * fz - 16) / _κ

    return x * _D65[0], y * _D65[1], z * _D65[2]


# --------------------------------------------------------------------------------------
# XYZ


def xyz_to_linear_srgb(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from XYZ to linear sRGB."""
    return _multiply(_XYZ_TO_LINEAR_SRGB, (X, Y, Z))


def xyz_to_lab(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from XYZ to Lab."""
    def f(value: float) -> float:
        return math.cbrt(value) if value > _ε else (_κ * value + 16) / 116

    fx, fy, fz = (f(c / w) for c, w in zip((X, Y, Z), _D65))
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


# --------------------------------------------------------------------------------------
# Arbitrary Conversions


def _collect_conversions(
    mod: dict[str, object],
    conversions: dict[str, dict[str, Converter]]
) -> None:
    for name, value in mod.items():
        if not name.startswith('_') and '_to_' in name and callable(value):
            source, _, target = name.partition('_to_')
            targets = conversions.setdefault(source, {})
            if target in targets:
                raise ValueError(f'duplicate conversion from {source} to {target}')
            targets[target] = cast(Converter, value)


_BASE_TREE = {
    'rgb256': ('srgb', 3),
    'srgb': ('linear_srgb', 2),
    'linear_srgb': ('xyz', 1),
    'hcl': ('lab', 2),
    'lab': ('xyz', 1),
    'xyz': (None, 0),
}

def _elaborate_route(source: str, target: str) -> tuple[str, ...]:
    """Elaborate the route from the source to the target color format or space."""
    if source not in _BASE_TREE:
        raise ValueError(f'{source} is not a valid color format or space')
    if target not in _BASE_TREE:
        raise ValueError(f'{target} is not a valid color format or space')

    # Trace paths from source and target towards root of base tree
    source_path: list[str] = [source]
    target_path: list[str] = [target]

    def step(path: list[str]) -> None:
        tag, _ = _BASE_TREE[path[-1]]
        assert tag is not None
        path.append(tag)

    # Sync up traces, so that both have same distance from root
    _, source_dist = _BASE_TREE[source]
    _, target_dist = _BASE_TREE[target]

    path = source_path if source_dist >= target_dist else target_path
    for _ in range(abs(source_dist - target_dist)):
        step(path)

    # Keep tracing in lock step until paths share last node
    while source_path[-1] != target_path[-1]:
        step(source_path)
        step(target_path)

    # Assemble complete path
    target_path.pop()
    target_path.reverse()
    return tuple(itertools.chain(source_path, target_path))


def _pass_through(*coordinates: float) -> tuple[float, float, float]:
    """Pass through the coordinates."""
    return cast(_Vector, tuple(coordinates))


def _create_converter(conversions: tuple[Converter, ...]) -> Converter:
    """
    Instantiate a closure that applies the given conversions. Doing so in a
    dedicated top-level function keeps the closure environment minimal.
    """
    def converter(*coordinates: float) -> tuple[float, float, float]:
        value = cast(_Vector, coordinates)
        for fn in conversions:
            value = fn(*value)
        return value
    return converter


_converter_cache: dict[str, dict[str, Converter]] = {}

def get_converter(source: str, target: str) -> Converter:
    """
    Instantiate a function that converts coordinates from the source color
    format or space to the target color format or space.

    This function factory caches converters to avoid re-instantiating the same
    converter over and over again. Each converter's name is computed as
    ``f"{source}_to_{target}"``.
    """
    if not _converter_cache:
        _collect_conversions(globals(), _converter_cache)

    # Handle trivial case
    if source == target:
        return _pass_through

    # Check whether converter already exists
    maybe_converter = _converter_cache.get(source, {}).get(target)
    if maybe_converter is not None:
        return maybe_converter

    route = _elaborate_route(source, target)

    # Turn list of nodes into list of functions into converter function
    conversions = tuple(
        _converter_cache[t1][t2] for t1, t2 in itertools.pairwise(route)
    )

    # Annotate converter for easy debugability
    converter = _create_converter(conversions)
    name = f'{source}_to_{target}'
    setattr(converter, '__name__', name)
    setattr(converter, '__qualname__', name)
    setattr(converter, 'route', route)
    setattr(converter, 'conversions', conversions)

    _converter_cache[source][target] = converter
    return converter
