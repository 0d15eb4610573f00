from unittest import TestCase
import os

from rtkit.errors import InvalidArgument, IOFailure, UnsupportedOperation
from rtkit.io import MemoryStream, NullStream


# -----------------------------------------------------------------------------


class TestMemoryStream(TestCase):
    def test_write_then_read(self):
        s = MemoryStream()
        self.assertEqual(5, s.write(b"hello"))
        self.assertEqual(5, s.position)
        self.assertTrue(s.end_of_stream)
        s.position = 0
        self.assertEqual(b"hel", s.read(3))
        self.assertEqual(b"lo", s.read(10))
        self.assertEqual(b"", s.read(1))
        self.assertEqual(5, s.size)

    def test_initial_data(self):
        s = MemoryStream(b"abc")
        self.assertEqual(0, s.position)
        self.assertFalse(s.end_of_stream)
        self.assertEqual(b"abc", s.read(3))

    def test_partial_write(self):
        s = MemoryStream()
        self.assertEqual(2, s.write(b"abcdef", 2))
        self.assertEqual(b"ab", s.get_buffer())

    def test_overwrite_in_the_middle(self):
        s = MemoryStream(b"abcdef")
        s.seek(2)
        s.write(b"XY")
        self.assertEqual(b"abXYef", s.get_buffer())
        self.assertEqual(4, s.position)

    def test_seek(self):
        s = MemoryStream(b"0123456789")
        self.assertEqual(3, s.seek(3))
        self.assertEqual(5, s.seek(2, os.SEEK_CUR))
        self.assertEqual(8, s.seek(-2, os.SEEK_END))
        self.assertEqual(b"89", s.read(5))
        with self.assertRaises(IOFailure):
            s.seek(-1)
        with self.assertRaises(InvalidArgument):
            s.seek(0, 42)
        self.assertEqual(10, s.position)

    def test_write_past_the_end_fills_with_zeros(self):
        s = MemoryStream(b"ab")
        s.seek(4)
        self.assertEqual(2, s.size)
        s.write(b"c")
        self.assertEqual(b"ab\0\0c", s.get_buffer())

    def test_set_size(self):
        s = MemoryStream(b"abcdef")
        s.set_size(3)
        self.assertEqual(b"abc", s.get_buffer())
        s.set_size(5)
        self.assertEqual(b"abc\0\0", s.get_buffer())
        with self.assertRaises(InvalidArgument):
            s.set_size(-1)

    def test_read_line(self):
        s = MemoryStream(b"first\nsecond\n\nlast")
        self.assertEqual(b"first\n", s.read_line())
        self.assertEqual(b"second\n", s.read_line())
        self.assertEqual(b"\n", s.read_line())
        self.assertEqual(b"last", s.read_line())
        self.assertTrue(s.end_of_stream)
        with self.assertRaises(IOFailure):
            s.read_line()

    def test_read_to_end(self):
        s = MemoryStream(b"0123456789")
        s.seek(6)
        self.assertEqual(b"6789", s.read_to_end())
        self.assertEqual(10, s.position)
        self.assertEqual(b"", s.read_to_end())
        s.seek(20)
        self.assertEqual(b"", s.read_to_end())
        self.assertEqual(20, s.position)

    def test_write_line(self):
        s = MemoryStream()
        terminator = os.linesep.encode()
        self.assertEqual(3 + len(terminator), s.write_line(b"abc"))
        self.assertEqual(2 + len(terminator), s.write_line(b"xyz", 2))
        self.assertEqual(b"abc" + terminator + b"xy" + terminator, s.get_buffer())
        s.position = 0
        self.assertEqual(b"abc" + terminator, s.read_line())

    def test_line_operations_on_closed_stream(self):
        s = MemoryStream(b"a\n")
        s.close()
        for operation in (lambda: s.read_line(), lambda: s.read_to_end(), lambda: s.write_line(b"x")):
            with self.assertRaises(IOFailure):
                operation()

    def test_negative_read(self):
        with self.assertRaises(InvalidArgument):
            MemoryStream(b"x").read(-1)

    def test_closed(self):
        with MemoryStream(b"abc") as s:
            self.assertFalse(s.closed)
        self.assertTrue(s.closed)
        self.assertFalse(s.can_read)
        self.assertEqual("MemoryStream(closed)", repr(s))
        for operation in (lambda: s.read(1), lambda: s.write(b"x"), lambda: s.size,
                          lambda: s.position, lambda: s.seek(0), lambda: s.get_buffer()):
            with self.assertRaises(IOFailure):
                operation()

    def test_copy_to(self):
        source = MemoryStream(b"0123456789")
        source.seek(4)
        destination = MemoryStream(b"--")
        destination.seek(0, os.SEEK_END)
        self.assertEqual(6, source.copy_to(destination, 4))
        self.assertEqual(b"--456789", destination.get_buffer())
        self.assertTrue(source.end_of_stream)

    def test_copy_to_checks_arguments(self):
        source = MemoryStream(b"abc")
        with self.assertRaises(InvalidArgument):
            source.copy_to(MemoryStream(), 0)
        closed = MemoryStream()
        closed.close()
        with self.assertRaises(UnsupportedOperation):
            source.copy_to(closed)
        with self.assertRaises(UnsupportedOperation):
            closed.copy_to(source)

    def test_write_to(self):
        source = MemoryStream(b"abc")
        source.seek(0, os.SEEK_END)
        destination = MemoryStream()
        self.assertEqual(3, source.write_to(destination))
        self.assertEqual(b"abc", destination.get_buffer())

    def test_copy_logs(self):
        with self.assertLogs("rtkit.io.streams", "DEBUG"):
            MemoryStream(b"abc").copy_to(MemoryStream())


# -----------------------------------------------------------------------------


class TestNullStream(TestCase):
    def test_everything_is_discarded(self):
        s = NullStream()
        self.assertEqual(0, s.write(b"abc"))
        self.assertEqual(b"", s.read(10))
        self.assertEqual(0, s.size)
        self.assertEqual(0, s.seek(100))
        s.position = 5
        self.assertEqual(0, s.position)
        self.assertTrue(s.end_of_stream)
        s.set_size(10)
        self.assertEqual(0, s.size)

    def test_copy(self):
        destination = MemoryStream(b"x")
        self.assertEqual(0, NullStream().copy_to(destination))
        self.assertEqual(b"x", destination.get_buffer())
        self.assertEqual(3, MemoryStream(b"abc").copy_to(NullStream()))

    def test_context_manager(self):
        with NullStream() as s:
            s.write(b"x")
        s.flush()


# -----------------------------------------------------------------------------
