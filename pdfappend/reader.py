# *-* coding: utf-8 *-*
"""
    Reader
    ~~~~~~
    Read side of an incremental update. Parsing is left to pypdf; this
    module answers the few questions the update needs (trailer, size,
    startxref, cross-reference entries) in terms of `pdfappend.generic`
    values.
"""
import io

from pypdf import PdfReader
from pypdf import generic as po

from . import generic

# generation of a free or unknown cross-reference slot
FREE_GENERATION = 65535

# entries of a cross-reference stream dictionary, meaningless in a
# classic trailer
XREF_STREAM_KEYS = ("Type", "W", "Index", "Length", "Filter", "DecodeParms", "XRefStm")


def find_startxref(datau):
    i = datau.rfind(b'startxref')
    if i == -1:
        return 0
    i += len(b'startxref')
    while i < len(datau) and datau[i] not in b'0123456789':
        i += 1
    j = i
    while j < len(datau) and datau[j] in b'0123456789':
        j += 1
    if i == j:
        return 0
    return int(datau[i:j])


class Reader(object):
    def __init__(self, datau, strict=False):
        self.datau = datau
        self.pdf = PdfReader(io.BytesIO(datau), strict=strict)

    def trailer(self):
        """Fresh copy of the document trailer, safe to modify."""
        trailer = self.convert(self.pdf.trailer, 0)
        for key in XREF_STREAM_KEYS:
            trailer.set_key(key, generic.ABSENT)
        return trailer

    def size(self):
        size = self.trailer().key("Size")
        if isinstance(size, generic.NumberObject):
            return int(size)
        return 0

    def startxref(self):
        return find_startxref(self.datau)

    def xref(self, obj):
        """(offset, generation) of the newest in-use entry for obj,
        (0, FREE_GENERATION) if there is none.
        """
        found = None
        for generation, entries in self.pdf.xref.items():
            if generation >= FREE_GENERATION or obj not in entries:
                continue
            if self.pdf.xref_free_entry.get(generation, {}).get(obj, False):
                continue
            if found is None or generation > found[1]:
                found = (entries[obj], generation)
        if found is None:
            return 0, FREE_GENERATION
        return found

    def resolve(self, ref):
        value = self.pdf.get_object(po.IndirectObject(ref.number, ref.generation, self.pdf))
        return self.convert(value, ref.number)

    def convert(self, value, obj):
        """Convert a pypdf object into a generic value tagged with obj.

        Nested indirect references are kept as references.
        """
        if isinstance(value, po.IndirectObject):
            result = generic.ObjectReference(value.idnum, value.generation)
        elif value is None or isinstance(value, po.NullObject):
            result = generic.NullObject()
        elif isinstance(value, po.BooleanObject):
            result = generic.BooleanObject(value.value)
        elif isinstance(value, po.NameObject):
            result = generic.NameObject(value[1:] if value.startswith('/') else value)
        elif isinstance(value, po.FloatObject):
            result = generic.FloatObject(float(value))
        elif isinstance(value, po.NumberObject):
            result = generic.NumberObject(int(value))
        elif isinstance(value, po.ByteStringObject):
            result = generic.StringObject(bytes(value))
        elif isinstance(value, po.TextStringObject):
            result = generic.StringObject(value.original_bytes)
        elif isinstance(value, po.ArrayObject):
            result = generic.ArrayObject(self.convert(v, obj) for v in value)
        elif isinstance(value, po.StreamObject):
            offset = self.xref(obj)[0] if obj else 0
            result = generic.StreamObject(
                self._convert_dict(value, obj), getattr(value, '_data', b''), offset
            )
        elif isinstance(value, po.DictionaryObject):
            result = self._convert_dict(value, obj)
        else:
            raise ValueError("unsupported PDF object", value)
        result.obj = obj
        return result

    def _convert_dict(self, value, obj):
        result = generic.DictionaryObject()
        for key in value.keys():
            name = key[1:] if key.startswith('/') else key
            result.set_key(name, self.convert(value.raw_get(key), obj))
        result.obj = obj
        return result
