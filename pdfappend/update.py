# *-* coding: utf-8 *-*
import io
import zlib

from . import generic, objects, traverse, writer
from .errors import InvalidReplacementError, ObjectNotFoundError, UnusableTrailerError
from .reader import FREE_GENERATION, Reader


def _header(dct):
    # a caller's DictionaryObject is kept, the filespec is built in it
    if dct is None:
        return generic.DictionaryObject()
    if not isinstance(dct, generic.DictionaryObject):
        return generic.DictionaryObject(dct)
    return dct


class IncrementalUpdate(object):
    """Objects to append to an existing PDF document.

    Nothing in `original` is ever rewritten: staged objects are written
    after it, followed by a new cross-reference section and a trailer
    chained to the previous one through /Prev.

    `udct` holds options:
        * compresslevel - zlib level for streams we compress
        * marker - text of the comment preceding the appended objects
    """

    def __init__(self, original, udct=None, reader=None):
        udct = udct or {}
        self.original = bytes(original)
        self.reader = reader if reader is not None else Reader(self.original)
        size = self.reader.size()
        if size < 1:
            raise UnusableTrailerError("too small Size", size)
        self.nobj = size
        self.compresslevel = udct.get("compresslevel", zlib.Z_DEFAULT_COMPRESSION)
        self.marker = udct.get("marker", writer.MARKER)
        self.addobjs = []
        self.replaceobjs = []

    @property
    def next_number(self):
        return self.nobj

    @property
    def additions(self):
        return tuple(self.addobjs)

    @property
    def replacements(self):
        return tuple(self.replaceobjs)

    def add_stream(self, content, dct=None):
        """Add a stream object made from content, returns it."""
        dct = _header(dct)
        obj = objects.stream_obj(self.nobj, 0, content, dct, self.compresslevel)
        self.addobjs.append(obj)
        self.nobj += 1
        return obj

    def add_file(self, filename, content, dct=None, subtype=None):
        """Add a file attachment named filename.

        Two objects are added, the embedded file stream and the file
        specification pointing at it; the latter is returned.
        """
        dct = _header(dct)
        stream = objects.embedded_file_obj(self.nobj, 0, content, subtype, self.compresslevel)
        filespec = objects.filespec_obj(
            self.nobj + 1, 0, stream.obj, stream.generation, filename, dct
        )
        self.addobjs.append(stream)
        self.addobjs.append(filespec)
        self.nobj += 2
        return filespec

    def replace_stream(self, obj, content, dct=None):
        """Replace existing object obj with a stream made from content.

        The generation is kept, this is the same object in a new revision.
        Objects that the trailer reaches through more than one path can not
        be replaced reliably yet; see `find`.
        """
        if obj == 0:
            raise InvalidReplacementError("cannot replace object 0")
        _, gen = self.reader.xref(obj)
        if gen == FREE_GENERATION:
            raise ObjectNotFoundError("object does not exist", obj)
        dct = _header(dct)
        o = objects.stream_obj(obj, gen, content, dct, self.compresslevel)
        self.replaceobjs.append(o)
        return o

    def find(self, obj):
        """All occurrences of object obj reachable from the original trailer."""
        return traverse.find_objects(self.reader, obj)

    def write(self, stream):
        """Write the updated document to stream, returns the byte count."""
        return writer.write(
            stream, self.original, self.addobjs, self.replaceobjs,
            self.reader, self.nobj, self.marker,
        )

    def output(self):
        fp = io.BytesIO()
        self.write(fp)
        return fp.getvalue()


def add_files(datau, files, udct=None):
    """Attach (filename, content) pairs to the document datau, returns the
    updated document.
    """
    cls = IncrementalUpdate(datau, udct)
    for filename, content in files:
        cls.add_file(filename, content)
    return cls.output()
