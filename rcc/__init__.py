"""Front end of a small C compiler: parser, syntax tree, assembly constructs and driver helpers."""

__version__ = "0.1.0"

__all__ = ["asm_constructs", "ast_model", "parsing", "driver"]