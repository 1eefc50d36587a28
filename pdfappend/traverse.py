# *-* coding: utf-8 *-*
import logging

from . import generic

logger = logging.getLogger(__name__)

# the one key expected to point back up the object graph
PARENT_KEY = "Parent"


def find_objects(reader, find):
    """Every occurrence of object `find` reachable from the trailer.

    The walk is depth first. It never descends an edge leading to an
    object numbered lower than the one it comes from, or back to the same
    object; such edges are logged unless keyed /Parent.
    """
    found = []
    _walk(reader, "trailer", reader.trailer(), 0, find, found)
    return found


def _walk(reader, akey, value, visited, find, found):
    indirect = isinstance(value, generic.ObjectReference)
    if indirect:
        value = reader.resolve(value)
    xobj = value.obj
    if xobj < visited or (indirect and xobj == visited):
        if akey != PARENT_KEY:
            logger.warning("%s may not go back in PDF object graph to %d: %s",
                           akey, xobj, value.ustring())
        return found
    if xobj == find:
        found.append(value)
        return found
    if isinstance(value, (generic.DictionaryObject, generic.StreamObject)):
        for key in list(value.keys()):
            _walk(reader, key, value.key(key), xobj, find, found)
    elif isinstance(value, generic.ArrayObject):
        for i, item in enumerate(value):
            _walk(reader, str(i), item, xobj, find, found)
    return found
