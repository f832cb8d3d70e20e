"""Pure rendering functions: structured data -> display strings.

All renderers follow the same pattern:
  - Input: readings, errors or ``AppState``
  - Output: str (or list of str)
  - No side effects, no I/O

Public API:
  - weather_utils: c_to_f, f_to_c, IconKey, condition_to_icon_key
  - display: display_temperature, location_label, format_coordinates,
    unit_toggle_label, error_message, error_hints
"""
