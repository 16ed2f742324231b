from nr5g_spectrum.utils.validation import as_float_column, is_real_number, point_columns

__all__ = ["as_float_column", "is_real_number", "point_columns"]
