# schematic_errors.py
"""
Errors raised while building clipboards and reading .schematic files.

File I/O errors are not wrapped: OSError from open/read/write reaches the
caller unchanged, as do errors from the host world during copy/paste.
"""


class GeometryError(ValueError):
    """A clipboard box that cannot exist (min above max) or cannot be stored."""


class SchematicFormatError(Exception):
    """The file parsed (or failed to parse) into something that is not a usable schematic."""


class MissingRootError(SchematicFormatError):
    def __init__(self):
        super().__init__('Tag "Schematic" does not exist or is not first')


class RootTagError(SchematicFormatError):
    def __init__(self, name, tag_type="Compound"):
        # name is None when the root is not a Compound; tag_type then says what it was
        self.name = name
        self.tag_type = tag_type
        found = tag_type if name is None else f'{tag_type} "{name}"'
        super().__init__(f'Tag "Schematic" does not exist or is not first (found {found})')


class MissingTagError(SchematicFormatError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Schematic file is missing a "{key}" tag')


class TagTypeError(SchematicFormatError):
    def __init__(self, key: str, expected: str, actual: str):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"{key} tag is not of tag type {expected} (got {actual})")


class UnsupportedMaterialsError(SchematicFormatError):
    def __init__(self, materials=None):
        # None when the tag is absent or not a String
        self.materials = materials
        super().__init__("Schematic file is not an Alpha schematic")
