# *-* coding: utf-8 *-*
"""
    Generic PDF values
    ~~~~~~~~~~~~~~~~~~
    One class per kind of PDF object. Values know how to render themselves
    as canonical text (`ustring`) and as file syntax (`write_to_stream`).

    `ABSENT` stands for "no such value": looking up a missing key returns
    it, and setting a key to it removes the key.
"""
import math

from .encoding import decode_text, encode_text
from .errors import NotKeyedContainerError

MAX_OBJECT_NUMBER = 0xffffffff
MAX_GENERATION = 0xffff

_ESCAPES = {
    ord('('): b'\\(',
    ord(')'): b'\\)',
    ord('\\'): b'\\\\',
    ord('\r'): b'\\r',
    ord('\n'): b'\\n',
}


class PdfObject(object):
    # number of the indirect object this value was read through, 0 if none
    obj = 0

    def key(self, key):
        return ABSENT

    def keys(self):
        return []

    def append(self, value):
        return ABSENT

    def set_key(self, key, value):
        raise NotKeyedContainerError("not a dict", type(self).__name__)

    def ustring(self):
        raise NotImplementedError()

    def write_to_stream(self, stream):
        stream.write(self.ustring().encode('ascii'))


class AbsentObject(PdfObject):
    def ustring(self):
        return ''

    def write_to_stream(self, stream):
        pass

    def __repr__(self):
        return 'ABSENT'


ABSENT = AbsentObject()


class NullObject(PdfObject):
    def ustring(self):
        return 'null'

    def __eq__(self, other):
        return isinstance(other, NullObject)

    def __hash__(self):
        return hash(None)

    def __repr__(self):
        return 'NullObject()'


class BooleanObject(PdfObject):
    def __init__(self, value):
        self.value = bool(value)

    def ustring(self):
        return 'true' if self.value else 'false'

    def __bool__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, BooleanObject):
            return self.value == other.value
        if isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return 'BooleanObject(%r)' % self.value


class NumberObject(int, PdfObject):
    def ustring(self):
        return '%d' % self


class FloatObject(float, PdfObject):
    def __new__(cls, value=0.0):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("not a PDF real number", value)
        return super(FloatObject, cls).__new__(cls, value)

    def ustring(self):
        # PDF has no exponent notation
        return ('%f' % self).rstrip('0').rstrip('.')


class StringObject(bytes, PdfObject):
    def __new__(cls, value=b''):
        if isinstance(value, str):
            value = encode_text(value)
        return super(StringObject, cls).__new__(cls, value)

    @property
    def text(self):
        text = decode_text(self)
        if text is None:
            text = self.decode('latin-1')
        return text

    def ustring(self):
        return '(' + self.text + ')'

    def write_to_stream(self, stream):
        stream.write(b'(')
        stream.write(b''.join(_ESCAPES.get(c, bytes([c])) for c in bytearray(self)))
        stream.write(b')')


class NameObject(str, PdfObject):
    def ustring(self):
        return '/' + self

    def write_to_stream(self, stream):
        stream.write(self.ustring().encode('utf-8'))


class ArrayObject(list, PdfObject):
    def __init__(self, values=()):
        super(ArrayObject, self).__init__(make_object(v) for v in values)

    def append(self, value):
        if value is not ABSENT:
            super(ArrayObject, self).append(make_object(value))
        return self

    def ustring(self):
        return '[' + ' '.join(v.ustring() for v in self) + ']'

    def write_to_stream(self, stream):
        stream.write(b'[')
        for i, v in enumerate(self):
            if i > 0:
                stream.write(b' ')
            v.write_to_stream(stream)
        stream.write(b']')


class DictionaryObject(dict, PdfObject):
    def __init__(self, values=None, **kwargs):
        super(DictionaryObject, self).__init__()
        if values is not None:
            for k, v in dict(values).items():
                self.set_key(k, v)
        for k, v in kwargs.items():
            self.set_key(k, v)

    def __setitem__(self, key, value):
        super(DictionaryObject, self).__setitem__(NameObject(key), make_object(value))

    def key(self, key):
        return self.get(key, ABSENT)

    def set_key(self, key, value):
        if value is ABSENT:
            self.pop(key, None)
        else:
            self[key] = value

    def ustring(self):
        return '<<' + ' '.join(
            '/%s %s' % (k, self[k].ustring()) for k in sorted(self)
        ) + '>>'

    def write_to_stream(self, stream):
        stream.write(b'<<')
        for i, k in enumerate(sorted(self)):
            if i > 0:
                stream.write(b' ')
            k.write_to_stream(stream)
            stream.write(b' ')
            self[k].write_to_stream(stream)
        stream.write(b'>>')


class StreamObject(PdfObject):
    def __init__(self, header=None, data=b'', offset=0):
        self.header = header if header is not None else DictionaryObject()
        self.data = data
        self.offset = offset

    def key(self, key):
        return self.header.key(key)

    def keys(self):
        return self.header.keys()

    def set_key(self, key, value):
        self.header.set_key(key, value)

    def ustring(self):
        return '%s@%d' % (self.header.ustring(), self.offset)

    def write_to_stream(self, stream):
        self.header.write_to_stream(stream)
        stream.write(b'\nstream\n')
        stream.write(self.data)
        stream.write(b'\nendstream')

    def __repr__(self):
        return 'StreamObject(%r, <%d bytes>)' % (self.header, len(self.data))


class ObjectReference(PdfObject):
    def __init__(self, number, generation=0):
        self.number = number
        self.generation = generation

    def ustring(self):
        return '%d %d R' % (self.number, self.generation)

    def __eq__(self, other):
        if not isinstance(other, ObjectReference):
            return NotImplemented
        return (self.number, self.generation) == (other.number, other.generation)

    def __hash__(self):
        return hash((self.number, self.generation))

    def __repr__(self):
        return 'ObjectReference(%d, %d)' % (self.number, self.generation)


class ObjectDefinition(PdfObject):
    def __init__(self, reference, value):
        self.reference = reference
        self.value = value

    def ustring(self):
        return '{%d %d obj}%s' % (
            self.reference.number, self.reference.generation, self.value.ustring()
        )


def reference(number, generation=0):
    """Reference to an indirect object, or ABSENT if the pair can not
    name one.
    """
    if not 0 <= number <= MAX_OBJECT_NUMBER or not 0 <= generation <= MAX_GENERATION:
        return ABSENT
    return ObjectReference(number, generation)


def make_object(obj):
    if isinstance(obj, PdfObject):
        return obj
    if obj is None:
        return NullObject()
    if isinstance(obj, bool):
        return BooleanObject(obj)
    if isinstance(obj, int):
        return NumberObject(obj)
    if isinstance(obj, float):
        return FloatObject(obj)
    if isinstance(obj, (str, bytes)):
        return StringObject(obj)
    if isinstance(obj, (list, tuple)):
        return ArrayObject(obj)
    if isinstance(obj, dict):
        return DictionaryObject(obj)
    raise ValueError("can`t convert to PdfObject", obj)
