from .num_utils import round_half_up, nan_to_zero, wrap_hue

__all__ = ["round_half_up", "nan_to_zero", "wrap_hue"]
