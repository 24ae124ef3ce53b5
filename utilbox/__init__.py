"""Everyday helpers for strings, maps, numbers, time, processes and HTTP."""

__version__ = "0.1.0"

__all__ = [
    "bytepool",
    "gofunc",
    "httpmock",
    "httpreq",
    "maputil",
    "mathutil",
    "netutil",
    "optional",
    "similar",
    "stdutil",
    "strcheck",
    "strconvert",
    "strencode",
    "strformat",
    "strrandom",
    "strsplit",
    "structs",
    "strutil",
    "sysutil",
    "testutil",
    "timex",
    "value",
]