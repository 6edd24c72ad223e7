"""Host-runtime types that are class-like but cross the client boundary intact."""

from __future__ import annotations

# Built-ins accepted by React Server Components plus Structured Clone types.
SERIALIZABLE_BUILT_INS: frozenset[str] = frozenset(
    {
        "Date",
        "Map",
        "Set",
        "Promise",
        "RegExp",
        "Error",
        "EvalError",
        "RangeError",
        "ReferenceError",
        "SyntaxError",
        "TypeError",
        "URIError",
        "ArrayBuffer",
        "Int8Array",
        "Uint8Array",
        "Uint8ClampedArray",
        "Int16Array",
        "Uint16Array",
        "Int32Array",
        "Uint32Array",
        "Float32Array",
        "Float64Array",
        "BigInt64Array",
        "BigUint64Array",
        "DataView",
        "Blob",
        "File",
        "FileList",
        "ImageData",
        "ImageBitmap",
        "Array",
        "Object",
    }
)
