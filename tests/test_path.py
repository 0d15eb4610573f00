from unittest import TestCase

from rtkit.errors import InvalidArgument
from rtkit.io.path import posix, windows


# -----------------------------------------------------------------------------


class TestWindowsPath(TestCase):
    directory = "C:\\User\\Watame\\Downloads"
    file = "C:\\User\\Watame\\Downloads\\Example.png"

    def test_ends_in_directory_separator(self):
        self.assertTrue(windows.ends_in_directory_separator(self.directory + "\\"))
        self.assertTrue(windows.ends_in_directory_separator(self.directory + "/"))
        self.assertFalse(windows.ends_in_directory_separator(self.file))
        self.assertFalse(windows.ends_in_directory_separator(""))

    def test_get_directory_name(self):
        self.assertEqual(self.directory, windows.get_directory_name(self.file))
        self.assertEqual("C:\\", windows.get_directory_name("C:\\User"))
        self.assertEqual("", windows.get_directory_name("C:\\"))

    def test_get_file_name(self):
        self.assertEqual("Example.png", windows.get_file_name(self.file))
        self.assertEqual("Example", windows.get_file_name_without_extension(self.file))
        self.assertEqual("x.txt", windows.get_file_name("C:/dir/x.txt"))
        self.assertEqual("", windows.get_file_name("C:\\"))

    def test_extensions(self):
        self.assertTrue(windows.has_extension(self.file))
        self.assertTrue(windows.has_extension(".gitignore"))
        self.assertFalse(windows.has_extension(self.directory))
        self.assertFalse(windows.has_extension("TrickyFileName."))
        self.assertEqual(".png", windows.get_extension(self.file))
        self.assertEqual("", windows.get_extension(self.directory))
        self.assertEqual("", windows.get_extension("dir.d\\file"))

    def test_roots(self):
        self.assertTrue(windows.is_path_rooted(self.file))
        self.assertFalse(windows.is_path_rooted(".\\relative\\path"))
        self.assertEqual("C:\\", windows.get_path_root(self.file))
        self.assertEqual("C:", windows.get_path_root("C:file"))
        self.assertEqual("\\", windows.get_path_root("\\dir\\file"))
        self.assertEqual("\\\\server\\share", windows.get_path_root("\\\\server\\share\\dir"))

    def test_normalize(self):
        self.assertEqual("C:\\a\\b", windows.normalize("C:/a//b"))
        self.assertEqual("\\\\server\\share\\x", windows.normalize("\\\\server//share\\x"))

    def test_get_full_path(self):
        self.assertEqual("C:\\b", windows.get_full_path("C:\\a\\..\\b"))
        self.assertEqual("C:\\", windows.get_full_path("C:\\.."))
        self.assertEqual("C:\\work\\src\\", windows.get_full_path("src\\.\\", "C:\\work"))


class TestPosixPath(TestCase):
    def test_change_extension(self):
        self.assertEqual("Moona.hey", posix.change_extension("Moona.peko", "hey"))
        self.assertEqual("Botan.poi", posix.change_extension("Botan.yeet", ".poi"))
        self.assertEqual("Pekora.kon.peko", posix.change_extension("Pekora.kon.kon", ".peko"))
        self.assertEqual("", posix.change_extension("", ".txt"))
        self.assertEqual("dir.d/file.txt", posix.change_extension("dir.d/file", "txt"))

    def test_change_extension_to_none_removes_it(self):
        self.assertEqual("Marine", posix.change_extension("Marine.nothorny", None))
        self.assertEqual("A.chan", posix.change_extension("A.chan.kun", None))
        self.assertEqual("Wakipai", posix.change_extension("Wakipai", None))

    def test_get_directory_name(self):
        self.assertEqual("/home/user", posix.get_directory_name("/home/user/file.txt"))
        self.assertEqual("/", posix.get_directory_name("/file"))
        self.assertEqual("", posix.get_directory_name("/"))
        self.assertEqual("", posix.get_directory_name("file"))
        self.assertEqual("", posix.get_directory_name(""))

    def test_backslash_is_not_a_separator(self):
        self.assertEqual("a\\b.txt", posix.get_file_name("/x/a\\b.txt"))
        self.assertFalse(posix.is_path_rooted("C:\\file"))

    def test_roots(self):
        self.assertEqual("/", posix.get_path_root("/home/user/foo/bar.sh"))
        self.assertEqual("", posix.get_path_root("home"))

    def test_combine(self):
        self.assertEqual("/FOO/BAR/BAZ.txt", posix.combine("/FOO", "BAR", "BAZ.txt"))
        self.assertEqual("/ROOT/FOO/BAR", posix.combine("NonRoot", "Ignore Pls", "/ROOT", "FOO", "BAR"))
        self.assertEqual("a/b", posix.combine("a/", "b"))
        self.assertEqual("a/b", posix.combine("a", "", "b"))
        self.assertEqual("", posix.combine())

    def test_join_keeps_rooted_arguments(self):
        self.assertEqual("a//b", posix.join("a", "/b"))

    def test_normalize(self):
        self.assertEqual("a/b/c", posix.normalize("a//b///c"))

    def test_get_full_path(self):
        self.assertEqual("/a/c/d", posix.get_full_path("/a/b/../c/./d"))
        self.assertEqual("/", posix.get_full_path("/.."))
        self.assertEqual("/", posix.get_full_path("/a/.."))
        self.assertEqual("/home/x/y", posix.get_full_path("x/./y", "/home"))
        self.assertEqual("/home/.hidden", posix.get_full_path("/home/.hidden"))

    def test_get_full_path_rejects_bad_input(self):
        with self.assertRaises(InvalidArgument):
            posix.get_full_path("")
        with self.assertRaises(InvalidArgument):
            posix.get_full_path("/a\0b")


# -----------------------------------------------------------------------------
