"""Parameter specification language: compiles spec maps into schemas."""

from .compiler import (
    SchemaCompiler,
    compile_schema,
    compile_spec,
    destructured_label,
    REQUIRED_MARKER,
    COMPILER_LABEL,
)

__all__ = [
    "SchemaCompiler",
    "compile_schema",
    "compile_spec",
    "destructured_label",
    "REQUIRED_MARKER",
    "COMPILER_LABEL",
]
