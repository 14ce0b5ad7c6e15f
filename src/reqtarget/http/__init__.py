"""src/reqtarget/http/__init__.py"""
