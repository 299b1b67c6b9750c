"""Code generators driven by scanner events.

Provides:
- webgal: WebGalPrinter observer and to_webgal()
"""

from kagscript.codegen.webgal import WebGalPrinter, to_webgal

__all__ = ["WebGalPrinter", "to_webgal"]
