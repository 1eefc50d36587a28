#!/usr/bin/env vpython3
# *-* coding: utf-8 *-*
import sys
import logging
from pdfappend.reader import Reader
from pdfappend.traverse import find_objects

logging.basicConfig(level=logging.WARNING)


def main():
    data = open(sys.argv[1], 'rb').read()
    reader = Reader(data)
    print('trailer', reader.trailer().ustring())
    print('startxref', reader.startxref(), 'size', reader.size())
    for obj in sys.argv[2:]:
        obj = int(obj)
        offset, gen = reader.xref(obj)
        print('*' * 20, obj, 'at', offset, 'generation', gen)
        for value in find_objects(reader, obj):
            print(value.ustring())


main()
