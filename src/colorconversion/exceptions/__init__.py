"""
Custom exception hierarchy for colorconversion.

## Exception Hierarchy

```
ColorConversionError (base)
├── ColorValidationError (also ValueError)
│   ├── MissingColorFieldsError   shape error
│   ├── ColorValueError           range/type error
│   ├── HexLengthError            length error
│   └── UnknownColorNameError
├── UnknownColorModelError (also ValueError)
└── SettingsValidationError (also ValueError)
```

A well-formed hex or name with no entry in the name table is not an
error: the lookup functions return None.

## Usage

```python
from colorconversion.conversions import rgb_to_hex
from colorconversion.exceptions import ColorValueError

try:
    rgb_to_hex({"red": 300, "green": 0, "blue": 0})
except ColorValueError as e:
    print(e.user_message)
    print(e.recovery_hint)
```
"""

from .base import ColorConversionError
from .config import SettingsValidationError
from .handlers import ErrorContext, wrap_settings_error, wrap_validation_error
from .validation import (
    ColorValidationError,
    ColorValueError,
    HexLengthError,
    MissingColorFieldsError,
    UnknownColorModelError,
    UnknownColorNameError,
)

__all__ = [
    # Base
    "ColorConversionError",
    # Validation
    "ColorValidationError",
    "ColorValueError",
    "HexLengthError",
    "MissingColorFieldsError",
    "UnknownColorModelError",
    "UnknownColorNameError",
    # Settings
    "SettingsValidationError",
    # Handlers
    "ErrorContext",
    "wrap_settings_error",
    "wrap_validation_error",
]
