import numpy as np
from typing import Callable, Union, cast

from ..errors import RangeViolation
from ..types.format_type import FormatType, HUE_360, max_non_hue
from ..types.color_types import ColorElement, ColourMode, element_to_array

from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl

SpaceLike = Union[str, ColourMode]

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
    ("hsv", "hsl"): np_hsv_to_hsl,
    ("hsl", "hsv"): np_hsl_to_hsv,
}

def _space(space: SpaceLike) -> ColourMode:
    try:
        return ColourMode(str(getattr(space, "value", space)).lower())
    except ValueError:
        raise RangeViolation(f"Unknown color space: {space!r}") from None

def _format(fmt: Union[str, FormatType]) -> FormatType:
    try:
        return FormatType(fmt)
    except ValueError:
        raise RangeViolation(f"Unknown format type: {fmt!r}") from None

def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.sign(values) * np.floor(np.abs(values) + 0.5)

def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        return color / maxval

    if space in ("hsv", "hsl"):
        h = color[..., 0]
        a = color[..., 1] / maxval
        b = color[..., 2] / maxval
        return np.stack([h, a, b], axis=-1)

    raise RangeViolation(f"Unknown space: {space}")

def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = np.clip(color, 0.0, 1.0) * maxval
        return _round_half_up(scaled).astype(int) if fmt == FormatType.INT else scaled

    if space in ("hsv", "hsl"):
        h = color[..., 0]
        a = np.clip(color[..., 1], 0.0, 1.0) * maxval
        b = np.clip(color[..., 2], 0.0, 1.0) * maxval

        if fmt == FormatType.INT:
            # 359.5 and up rounds to 360, which is hue 0
            hue = np.mod(_round_half_up(h), HUE_360)
            return np.stack([hue, _round_half_up(a), _round_half_up(b)], axis=-1).astype(int)

        return np.stack([h, a, b], axis=-1)

    raise RangeViolation(f"Unknown space: {space}")

def convert_alpha(alpha: np.ndarray | None, input_fmt: FormatType, output_fmt: FormatType) -> np.ndarray | None:
    if alpha is None:
        return None

    max_in  = max_non_hue[input_fmt]
    max_out = max_non_hue[output_fmt]

    result = alpha / max_in * max_out
    return _round_half_up(result).astype(int) if output_fmt == FormatType.INT else result

def _convert_core(
    color: np.ndarray,
    from_space: ColourMode,
    to_space: ColourMode,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    expected = 4 if from_space.has_alpha else 3
    if color.shape[-1] != expected:
        raise RangeViolation(
            f"{from_space.value} expects last dimension to be {expected}, got shape {color.shape}"
        )

    if from_space.has_alpha:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    fs, ts = from_space.base, to_space.base

    # normalize -> convert -> scale
    base_norm = normalize(base, fs, input_fmt)

    if fs == ts:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(fs, ts)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )

    out = scale(converted, ts, output_fmt)

    if to_space.has_alpha:
        new_alpha = convert_alpha(alpha, input_fmt, output_fmt)
        if new_alpha is None:
            # opaque when the input had no alpha
            default_alpha = max_non_hue[output_fmt]
            alpha_array = np.full(out.shape[:-1] + (1,), default_alpha)
            return np.concatenate([out, alpha_array], axis=-1)
        return np.concatenate([out, new_alpha[..., None]], axis=-1)

    return out


def convert(
    color: ColorElement,
    from_space: SpaceLike,
    to_space: SpaceLike,
    input_type: Union[str, FormatType] = FormatType.INT,
    output_type: Union[str, FormatType] = FormatType.INT,
) -> ColorElement:
    """
    Convert one colour tuple between spaces and formats.

    Alpha, when present, is the *last* element (``rgba``, ``hsva``, ``hsla``).
    Hue is always in degrees; the other channels follow ``input_type`` /
    ``output_type`` (0-255, 0-1 or 0-100).

    >>> convert((255, 0, 0), "rgb", "hsv", output_type=FormatType.FLOAT)
    (0.0, 1.0, 1.0)
    """
    fs, ts = _space(from_space), _space(to_space)
    in_fmt, out_fmt = _format(input_type), _format(output_type)
    if fs == ts and in_fmt == out_fmt:
        return color
    result = _convert_core(element_to_array(color), fs, ts, in_fmt, out_fmt)
    values = result.tolist()
    return tuple(values) if result.ndim == 1 else cast(ColorElement, result)

def np_convert(
    color: np.ndarray,
    from_space: SpaceLike,
    to_space: SpaceLike,
    input_type: Union[str, FormatType] = FormatType.INT,
    output_type: Union[str, FormatType] = FormatType.INT,
) -> np.ndarray:
    """Vectorized :func:`convert` over an array whose last axis holds the channels."""
    fs, ts = _space(from_space), _space(to_space)
    in_fmt, out_fmt = _format(input_type), _format(output_type)
    if fs == ts and in_fmt == out_fmt:
        return color
    return _convert_core(
        np.asarray(color, dtype=float),
        fs,
        ts,
        in_fmt,
        out_fmt,
    )
