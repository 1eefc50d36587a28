#!/usr/bin/env vpython3
# *-* coding: utf-8 *-*
import sys
import os
import mimetypes
from pdfappend.update import IncrementalUpdate

#import logging
#logging.basicConfig(level=logging.DEBUG)


def main():
    fname = 'pdf.pdf'
    if len(sys.argv) > 1:
        fname = sys.argv[1]
    attachments = sys.argv[2:]
    datau = open(fname, 'rb').read()
    upd = IncrementalUpdate(datau, {'marker': 'pdf-add-file'})
    for attachment in attachments:
        subtype, _ = mimetypes.guess_type(attachment)
        content = open(attachment, 'rb').read()
        fs = upd.add_file(os.path.basename(attachment), content, subtype=subtype)
        print(attachment, '->', fs.definition().ustring())
    fname = fname.replace('.pdf', '-attached.pdf')
    with open(fname, 'wb') as fp:
        n = upd.write(fp)
    print(fname, n, 'bytes, next object', upd.next_number)


main()
