# *-* coding: utf-8 *-*
"""
    Incremental writer
    ~~~~~~~~~~~~~~~~~~
    Appends staged objects, a cross-reference section and a trailer after
    the untouched original bytes.

    Added and replaced objects are listed in private trailer keys, so they
    do not show up as ordinary attachments of the document.
"""
import logging

from . import generic
from .errors import IncrementalWriteError
from .reader import FREE_GENERATION

logger = logging.getLogger(__name__)

ADDED_FILES = "QoorpAddedFiles1"
ADDED_STREAMS = "QoorpAddedStreams1"
REPLACED_STREAMS = "QoorpReplacedStreams1"

MARKER = "Qoorp additions"


class CountingStream(object):
    def __init__(self, stream):
        self.stream = stream
        self.written = 0

    def write(self, data):
        size = len(data)
        while data:
            try:
                n = self.stream.write(data)
            except OSError as ex:
                raise IncrementalWriteError(self.written, *ex.args) from ex
            # file-likes that do not report a count took everything
            if n is None:
                n = len(data)
            if n == 0:
                raise IncrementalWriteError(self.written, "stream accepted no data")
            self.written += n
            data = data[n:]
        return size


def write(stream, original, additions, replacements, reader, nobj, marker=MARKER):
    """Write the updated document to stream, return the number of bytes
    written.
    """
    out = CountingStream(stream)
    out.write(original)
    if not additions and not replacements:
        return out.written
    write_objs(out, additions, replacements, marker, base=len(original))
    startxref = out.written
    write_xref(out, additions, replacements, reader, len(original))
    write_trailer(out, additions, replacements, reader, nobj)
    out.write(b'startxref\n%d\n%%%%EOF\n' % startxref)
    return out.written


def write_objs(out, additions, replacements, marker=MARKER, base=0):
    """Write all objects, remembering the offset of each relative to
    `base`, the end of the original document.
    """
    out.write(b'% ' + marker.encode('utf-8') + b'\n')
    for r in replacements:
        r.offset = out.written - base
        r.write_to_stream(out)
    for a in additions:
        a.offset = out.written - base
        a.write_to_stream(out)


def write_xref(out, additions, replacements, reader, bodylen):
    out.write(b'xref\n')
    for r in replacements:
        _, gen = reader.xref(r.obj)
        if gen >= FREE_GENERATION:
            logger.warning("object does not exist in xref: %d", r.obj)
            continue
        out.write(b'%d 1\n' % r.obj)
        out.write(xref_entry(r.offset + bodylen, r.generation))
    if additions:
        out.write(b'%d %d\n' % (additions[0].obj, len(additions)))
    for a in additions:
        out.write(xref_entry(a.offset + bodylen, a.generation))


def xref_entry(offset, generation):
    return b'%010d %05d n \n' % (offset, generation)


def write_trailer(out, additions, replacements, reader, nobj):
    t = reader.trailer()
    t.set_key("Size", generic.NumberObject(nobj))
    t.set_key("Prev", generic.NumberObject(reader.startxref()))
    if additions:
        trailer_add(additions, t)
    if replacements:
        trailer_replace(replacements, t)
    out.write(b'trailer\n')
    t.write_to_stream(out)
    out.write(b'\n')


def trailer_add(objs, t):
    fs = generic.ArrayObject()
    ss = generic.ArrayObject()
    for obj in objs:
        v = obj.reference
        if v is generic.ABSENT:
            logger.warning("can not reference added object %s", obj.definition().ustring())
        elif obj.stream is not None:
            ss.append(v)
        else:
            fs.append(v)
    if fs:
        t.set_key(ADDED_FILES, fs)
    if ss:
        t.set_key(ADDED_STREAMS, ss)


def trailer_replace(objs, t):
    rs = generic.ArrayObject()
    for obj in objs:
        v = obj.reference
        if v is generic.ABSENT:
            logger.warning("can not reference replaced object %s", obj.definition().ustring())
        else:
            rs.append(v)
    if rs:
        t.set_key(REPLACED_STREAMS, rs)
