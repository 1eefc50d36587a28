#!/usr/bin/env vpython3
# *-* coding: utf-8 *-*
import sys
from pdfappend.update import IncrementalUpdate


def main():
    fname = sys.argv[1]
    obj = int(sys.argv[2])
    content = open(sys.argv[3], 'rb').read()
    datau = open(fname, 'rb').read()
    upd = IncrementalUpdate(datau)
    found = upd.find(obj)
    if len(found) > 1:
        print('object', obj, 'is reachable through', len(found), 'paths, the result may be wrong')
    upd.replace_stream(obj, content)
    fname = fname.replace('.pdf', '-replaced.pdf')
    with open(fname, 'wb') as fp:
        upd.write(fp)


main()
