#!/usr/bin/env vpython3
# coding: utf-8
import io
import re
import unittest

from pdfappend import generic, objects, writer
from pdfappend.errors import IncrementalWriteError

import samplepdf

ORIGINAL = b'%PDF-1.4\n...original body...\n%%EOF\n'

XREF_ENTRY = re.compile(rb'\A\d{10} \d{5} n \n\Z')


def fake_reader(xref=None):
    trailer = generic.DictionaryObject({
        'Size': 6,
        'Root': generic.ObjectReference(1, 0),
        'ID': [generic.StringObject(b'\x01('), generic.StringObject(b'\x02)')],
    })
    return samplepdf.FakeReader(trailer, startxref=502, xref=xref or {5: (400, 0)})


def xref_section(data):
    start = data.rindex(b'\nxref\n') + len(b'\nxref\n')
    end = data.index(b'trailer\n', start)
    return data[start:end].splitlines(True)


class WriterTests(unittest.TestCase):
    def additions(self):
        s = objects.stream_obj(6, 0, b'some content', generic.DictionaryObject())
        fs = objects.filespec_obj(7, 0, 6, 0, 'f.txt', generic.DictionaryObject())
        return [s, fs]

    def test_nothing_staged(self):
        fp = io.BytesIO()
        n = writer.write(fp, ORIGINAL, [], [], fake_reader(), 6)
        self.assertEqual(fp.getvalue(), ORIGINAL)
        self.assertEqual(n, len(ORIGINAL))

    def test_layout(self):
        additions = self.additions()
        fp = io.BytesIO()
        n = writer.write(fp, ORIGINAL, additions, [], fake_reader(), 8)
        data = fp.getvalue()
        self.assertEqual(n, len(data))
        assert data.startswith(ORIGINAL + b'% Qoorp additions\n6 0 obj\n')
        for a in additions:
            self.assertEqual(data[len(ORIGINAL) + a.offset:].split(b'\n', 1)[0],
                             b'%d 0 obj' % a.obj)
        xref = data.rindex(b'\nxref\n') + 1
        assert data.endswith(b'startxref\n%d\n%%%%EOF\n' % xref)

    def test_xref_entries(self):
        additions = self.additions()
        replacement = objects.stream_obj(5, 0, b'new', generic.DictionaryObject())
        fp = io.BytesIO()
        writer.write(fp, ORIGINAL, additions, [replacement], fake_reader(), 8)
        lines = xref_section(fp.getvalue())
        self.assertEqual(lines[0], b'5 1\n')
        self.assertEqual(lines[2], b'6 2\n')
        self.assertEqual(len(lines), 5)
        for line, obj in zip([lines[1], lines[3], lines[4]], [replacement] + additions):
            self.assertEqual(len(line), 20)
            assert XREF_ENTRY.match(line)
            self.assertEqual(int(line[:10]), len(ORIGINAL) + obj.offset)
        self.assertEqual(writer.xref_entry(1234, 7), b'0000001234 00007 n \n')

    def test_trailer(self):
        additions = self.additions()
        replacement = objects.stream_obj(5, 0, b'new', generic.DictionaryObject())
        fp = io.BytesIO()
        writer.write(fp, ORIGINAL, additions, [replacement], fake_reader(), 8)
        data = fp.getvalue()
        trailer = data[data.rindex(b'trailer\n'):data.rindex(b'startxref')]
        self.assertEqual(
            trailer,
            b'trailer\n<</ID [(\x01\\() (\x02\\))] /Prev 502'
            b' /QoorpAddedFiles1 [7 0 R] /QoorpAddedStreams1 [6 0 R]'
            b' /QoorpReplacedStreams1 [5 0 R] /Root 1 0 R /Size 8>>\n',
        )

    def test_trailer_without_files(self):
        s = objects.stream_obj(6, 0, b'some content', generic.DictionaryObject())
        t = generic.DictionaryObject()
        writer.trailer_add([s], t)
        self.assertEqual(list(t.keys()), [writer.ADDED_STREAMS])

    def test_unreferenceable_object_skipped(self):
        s = objects.stream_obj(2 ** 32, 0, b'x', generic.DictionaryObject())
        t = generic.DictionaryObject()
        with self.assertLogs('pdfappend.writer', level='WARNING'):
            writer.trailer_add([s], t)
            writer.trailer_replace([s], t)
        self.assertEqual(len(t), 0)

    def test_vanished_replacement_skipped(self):
        replacement = objects.stream_obj(5, 0, b'new', generic.DictionaryObject())
        fp = io.BytesIO()
        with self.assertLogs('pdfappend.writer', level='WARNING') as logs:
            writer.write(fp, ORIGINAL, [], [replacement], fake_reader(xref={1: (9, 0)}), 6)
        self.assertIn('object does not exist in xref: 5', logs.output[0])
        self.assertEqual(xref_section(fp.getvalue()), [])

    def test_marker(self):
        s = objects.stream_obj(6, 0, b'x', generic.DictionaryObject())
        fp = io.BytesIO()
        writer.write(fp, ORIGINAL, [s], [], fake_reader(), 7, marker='revision 2')
        assert fp.getvalue().startswith(ORIGINAL + b'% revision 2\n6 0 obj\n')

    def test_write_failure(self):
        fp = samplepdf.FailingStream(len(ORIGINAL) + 5)
        with self.assertRaises(IncrementalWriteError) as cm:
            writer.write(fp, ORIGINAL, self.additions(), [], fake_reader(), 8)
        self.assertEqual(cm.exception.written, len(ORIGINAL))
        self.assertIsInstance(cm.exception.__cause__, OSError)
        self.assertEqual(cm.exception.errno, 28)
        self.assertEqual(cm.exception.strerror, 'No space left on device')
        self.assertEqual(bytes(fp.data), ORIGINAL)

    def test_write_failure_at_start(self):
        fp = samplepdf.FailingStream(0)
        with self.assertRaises(OSError) as cm:
            writer.write(fp, ORIGINAL, [], [], fake_reader(), 6)
        self.assertEqual(cm.exception.written, 0)

    def test_short_writes(self):
        fp = samplepdf.ShortStream(7)
        n = writer.write(fp, ORIGINAL, self.additions(), [], fake_reader(), 8)
        expected = io.BytesIO()
        writer.write(expected, ORIGINAL, self.additions(), [], fake_reader(), 8)
        self.assertEqual(bytes(fp.data), expected.getvalue())
        self.assertEqual(n, len(expected.getvalue()))
        self.assertGreater(fp.calls, len(ORIGINAL) // 7)

    def test_stream_taking_nothing(self):
        fp = samplepdf.ShortStream(0)
        with self.assertRaises(IncrementalWriteError) as cm:
            writer.write(fp, ORIGINAL, [], [], fake_reader(), 6)
        self.assertEqual(cm.exception.written, 0)


if __name__ == '__main__':
    unittest.main()
