# file: phonemeta/core/__init__.py
