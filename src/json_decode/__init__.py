"""
json-decode - typed decoding of untyped JSON trees

File: src/json_decode/__init__.py
Last updated: 2026-10-18

Purpose
- Package root. Re-exports the decoder combinators, the error model and its
  renderer, the document entry points, and the settings API.

Functional requirements
- Must not have side effects at import time (no settings loading, no logging init).

Example
-------
>>> from json_decode import field, int_
>>> point = field("x", int_)
>>> point.decode({"x": 3})
3
"""

from json_decode.alternation import nullable, one_of
from json_decode.combinators import (
    array,
    field,
    index,
    object_,
    optional_field,
    optional_nullable_field,
)
from json_decode.config import DecodeSettings, SettingsLoadError, load_settings
from json_decode.decoder import (
    Decoder,
    DecoderLike,
    boolean,
    double_,
    float_,
    int_,
    json_array,
    json_object,
    json_value,
    long_,
    null_,
    string,
)
from json_decode.documents import (
    DocumentLoadError,
    decode_file,
    decode_json_text,
    decode_yaml_text,
)
from json_decode.errors import (
    ArrayIndexError,
    DecodingError,
    Failure,
    FieldError,
    JsonDecodingError,
    OneOfError,
    at_field,
    at_index,
    failure,
    multiple,
)
from json_decode.render import breadcrumb, render
from json_decode.result import Err, Ok, Result

__version__ = "0.1.0"

__all__ = [
    "ArrayIndexError",
    "DecodeSettings",
    "Decoder",
    "DecoderLike",
    "DecodingError",
    "DocumentLoadError",
    "Err",
    "Failure",
    "FieldError",
    "JsonDecodingError",
    "Ok",
    "OneOfError",
    "Result",
    "SettingsLoadError",
    "__version__",
    "array",
    "at_field",
    "at_index",
    "boolean",
    "breadcrumb",
    "decode_file",
    "decode_json_text",
    "decode_yaml_text",
    "double_",
    "failure",
    "field",
    "float_",
    "index",
    "int_",
    "json_array",
    "json_object",
    "json_value",
    "load_settings",
    "long_",
    "multiple",
    "null_",
    "nullable",
    "object_",
    "one_of",
    "optional_field",
    "optional_nullable_field",
    "render",
    "string",
]
