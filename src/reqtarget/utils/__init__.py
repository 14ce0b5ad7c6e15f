"""src/reqtarget/utils/__init__.py"""
