# file: phonemeta/io/__init__.py
