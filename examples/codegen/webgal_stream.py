"""Stream WebGAL statements while the scanner runs."""

from kagscript import TokenKind, kind_is, new_cursor, register_listener, start_parse
from kagscript.codegen import WebGalPrinter

SCENE = """*page0|
@setdaytime
　经过长途跋涉，到达了郊外的森林。[lr]
@pg
"""

cursor = new_cursor(SCENE)
WebGalPrinter().attach(cursor)
register_listener(cursor, lambda kind, value: print(f"; tag {value}"), kind_is(TokenKind.TAG))
start_parse(cursor)
