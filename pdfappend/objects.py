# *-* coding: utf-8 *-*
import hashlib
import zlib

import attr

from . import generic


def _optional_bytes(obj, attribute, value):
    if value is not None and not isinstance(value, bytes):
        raise ValueError(
            "'{}' must be bytes or None, got {!r}".format(attribute.name, type(value))
        )


@attr.s
class StagedObject(object):
    """An indirect object waiting to be appended to the document.

    `stream` is None for a plain dictionary object. `offset` is filled in
    by the writer, relative to the start of the appended data.
    """
    obj = attr.ib(validator=attr.validators.instance_of(int))
    generation = attr.ib(validator=attr.validators.instance_of(int))
    dct = attr.ib(validator=attr.validators.instance_of(generic.DictionaryObject))
    stream = attr.ib(default=None, validator=_optional_bytes)
    offset = attr.ib(default=0)

    @property
    def reference(self):
        return generic.reference(self.obj, self.generation)

    def value(self):
        if self.stream is None:
            return self.dct
        return generic.StreamObject(self.dct, self.stream, self.offset)

    def definition(self):
        return generic.ObjectDefinition(generic.ObjectReference(self.obj, self.generation), self.value())

    def write_to_stream(self, stream):
        stream.write(b'%d %d obj\n' % (self.obj, self.generation))
        self.value().write_to_stream(stream)
        stream.write(b'\nendobj\n')


def stream_obj(obj, generation, content, dct, compresslevel=zlib.Z_DEFAULT_COMPRESSION):
    # If there is no Filter, we compress the content ourselves.
    if dct.key("Filter") is generic.ABSENT:
        dct.set_key("Filter", generic.NameObject("FlateDecode"))
        data = zlib.compress(content, compresslevel)
    else:
        data = bytes(content)
    if dct.key("Length") is generic.ABSENT:
        dct.set_key("Length", generic.NumberObject(len(data)))
    return StagedObject(obj, generation, dct, data)


def embedded_file_obj(obj, generation, content, subtype=None, compresslevel=zlib.Z_DEFAULT_COMPRESSION):
    dct = generic.DictionaryObject()
    dct.set_key("Type", generic.NameObject("EmbeddedFile"))
    if subtype is not None:
        # names are written unescaped, MIME types carry a '/'
        dct.set_key("Subtype", generic.NameObject(subtype.replace('/', '#2F')))
    dct.set_key("Params", generic.DictionaryObject({
        "Size": generic.NumberObject(len(content)),
        "CheckSum": generic.StringObject(hashlib.md5(content).digest()),
    }))
    return stream_obj(obj, generation, content, dct, compresslevel)


def filespec_obj(obj, generation, fobj, fgeneration, filename, dct):
    dct.set_key("Type", generic.NameObject("Filespec"))
    dct.set_key("F", generic.StringObject(filename))
    ef = generic.DictionaryObject()
    ef.set_key("F", generic.ObjectReference(fobj, fgeneration))
    dct.set_key("EF", ef)
    return StagedObject(obj, generation, dct)
