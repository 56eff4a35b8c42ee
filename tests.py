#!/usr/bin/env python

import errno
import io
import logging
import os
import os.path
import shutil
import stat
import sys
import tempfile
import unittest

from unittest import mock

import rationalise

testdata0 = b""
testdata1 = b"1234" * 1024 + b"abc"
testdata2 = b"1234" * 1024 + b"xyz"
testdata3 = b"hello, world\n"
testdata4 = b"x" * (3 * rationalise.COMPARE_BUFSIZE) + b"a"
testdata5 = b"x" * (3 * rationalise.COMPARE_BUFSIZE) + b"b"

utf8_filenames = sys.getfilesystemencoding().lower() in ("utf-8", "utf8")


def get_inode(filename):
    return os.lstat(filename).st_ino


def run_rat(*args):
    """Run the command line tool, returning what it printed on stdout."""
    with mock.patch('sys.stdout', new_callable=io.StringIO) as out:
        rationalise.main(list(args))
    return out.getvalue()


class TestModuleFunctions(unittest.TestCase):
    def test_humanize_number(self):
        f = rationalise._humanize_number
        self.assertEqual("0 bytes", f(0))
        self.assertEqual("1023 bytes", f(1023))
        self.assertEqual("1.000 KiB", f(1024))
        self.assertEqual("1.000 MiB", f(1024**2))
        self.assertEqual("1.000 GiB", f(1024**3))
        self.assertEqual("1.000 TiB", f(1024**4))
        self.assertEqual("1.000 PiB", f(1024**5))

    def test_make_path(self):
        f = rationalise._make_path
        self.assertEqual("a", f(".", "a"))
        self.assertEqual("a", f("", "a"))
        self.assertEqual("a", f(None, "a"))
        self.assertEqual("/x/a", f("dir", "/x/a"))
        self.assertEqual("dir/a", f("dir", "a"))
        self.assertEqual("dir/sub/a", f("dir/sub", "a"))
        # No normalisation is performed
        self.assertEqual("dir//a", f("dir/", "a"))
        self.assertEqual("./sub/a", f("./sub", "a"))

    def test_saved_copy_name(self):
        name = rationalise._saved_copy_name("dir/target")
        self.assertTrue(name.startswith("dir/target"))
        suffix = name[len("dir/target"):]
        self.assertEqual(len(suffix), 8)
        self.assertEqual(int(suffix[:4], 16), os.getpid() & 0xffff)
        int(suffix[4:], 16)  # must be hex

    def test_class_index_masks_ignored_components(self):
        options = rationalise.default_options()
        index = rationalise.ClassIndex(options)
        key = rationalise.ClassKey(13, 1, 1000, 100, 0o644)
        other_uid = key._replace(uid=1001)
        other_perms = key._replace(perms=0o600)

        self.assertTrue(index.insert(rationalise.FileRecord("a", ".", 1), key))
        self.assertFalse(index.insert(rationalise.FileRecord("b", ".", 2), key))
        self.assertTrue(index.insert(rationalise.FileRecord("c", ".", 3), other_uid))
        self.assertTrue(index.insert(rationalise.FileRecord("d", ".", 4), other_perms))
        self.assertEqual(len(index), 3)

        options.ignore_uid = True
        options.ignore_perm = True
        index = rationalise.ClassIndex(options)
        index.insert(rationalise.FileRecord("a", ".", 1), key)
        index.insert(rationalise.FileRecord("c", ".", 3), other_uid)
        index.insert(rationalise.FileRecord("d", ".", 4), other_perms)
        self.assertEqual(len(index), 1)
        eqclass = next(iter(index))
        self.assertEqual([r.name for r in eqclass], ["a", "c", "d"])
        self.assertEqual(eqclass.size, 13)

    def test_class_index_never_mixes_size_or_device(self):
        options = rationalise.default_options()
        options.ignore_uid = options.ignore_gid = options.ignore_perm = True
        index = rationalise.ClassIndex(options)
        key = rationalise.ClassKey(13, 1, 0, 0, 0o644)
        index.insert(rationalise.FileRecord("a", ".", 1), key)
        index.insert(rationalise.FileRecord("b", ".", 2), key._replace(size=14))
        index.insert(rationalise.FileRecord("c", ".", 3), key._replace(device=2))
        self.assertEqual(len(index), 3)
        for eqclass in index:
            self.assertEqual(len(eqclass), 1)


class BaseTests(unittest.TestCase):
    def setUp(self):
        self.setup_tempdir()

    def tearDown(self):
        os.chdir(self._saved_cwd)
        # Make sure everything can be removed
        for dirpath, dirnames, filenames in os.walk(self.root):
            os.chmod(dirpath, stat.S_IRWXU)
        shutil.rmtree(self.root)

    def setup_tempdir(self):
        self._saved_cwd = os.getcwd()
        self.root = tempfile.mkdtemp()
        os.chdir(self.root)

        # Keep track of all files, and their content, for verifying later
        self.file_contents = {}

    def make_file(self, pathname, contents):
        assert pathname not in self.file_contents
        dirname = os.path.dirname(pathname)
        if dirname and not os.path.isdir(dirname):
            os.makedirs(dirname)
        with open(pathname, 'wb') as f:
            f.write(contents)
        self.file_contents[pathname] = contents

    def make_linked_file(self, src, dst):
        assert dst not in self.file_contents
        os.link(src, dst)
        self.file_contents[dst] = self.file_contents[src]

    def verify_file_contents(self):
        for pathname, contents in self.file_contents.items():
            with open(pathname, 'rb') as f:
                self.assertEqual(f.read(), contents)

    def inodes(self):
        return dict((pathname, get_inode(pathname)) for pathname in self.file_contents)

    def leftover_files(self):
        """Return any files in the tree that were not created by the test."""
        found = set()
        for dirpath, dirnames, filenames in os.walk("."):
            for filename in filenames:
                found.add(os.path.normpath(os.path.join(dirpath, filename)))
        return found - set(os.path.normpath(p) for p in self.file_contents)


class TestCompareFiles(BaseTests):
    def test_identical(self):
        self.make_file("a", testdata1)
        self.make_file("b", testdata1)
        self.assertEqual(rationalise._compare_files("a", "b"), rationalise.COMPARE_SAME)

    def test_empty_files_are_identical(self):
        self.make_file("a", testdata0)
        self.make_file("b", testdata0)
        self.assertEqual(rationalise._compare_files("a", "b"), rationalise.COMPARE_SAME)

    def test_differ_in_last_byte(self):
        self.make_file("a", testdata1)
        self.make_file("b", testdata2)
        self.assertEqual(rationalise._compare_files("a", "b"), rationalise.COMPARE_DIFFERENT)

    def test_differ_after_several_buffers(self):
        self.make_file("a", testdata4)
        self.make_file("b", testdata5)
        self.assertEqual(rationalise._compare_files("a", "b"), rationalise.COMPARE_DIFFERENT)

    def test_same_prefix_different_length(self):
        self.make_file("a", b"abc")
        self.make_file("b", b"abcd")
        self.assertEqual(rationalise._compare_files("a", "b"), rationalise.COMPARE_DIFFERENT)
        self.assertEqual(rationalise._compare_files("b", "a"), rationalise.COMPARE_DIFFERENT)

    def test_unreadable(self):
        self.make_file("a", testdata3)
        self.assertEqual(rationalise._compare_files("a", "missing"),
                         rationalise.COMPARE_UNREADABLE)
        self.assertEqual(rationalise._compare_files("missing", "a"),
                         rationalise.COMPARE_UNREADABLE)


class TestProbe(BaseTests):
    def setUp(self):
        self.setup_tempdir()
        self.options = rationalise.default_options()
        self.make_file("dir/a", testdata3)
        self.make_file("empty", testdata0)
        os.symlink("dir/a", "link_to_file")
        os.symlink("dir", "link_to_dir")
        os.symlink("nowhere", "dangling")

    def test_regular_file(self):
        result, key, record = rationalise._probe("a", "dir", self.options)
        st = os.lstat("dir/a")
        self.assertEqual(result, rationalise.PROBE_REGULAR)
        self.assertEqual(record.name, "dir/a")
        self.assertEqual(record.dirname, "dir")
        self.assertEqual(record.inode, st.st_ino)
        self.assertEqual(key, (len(testdata3), st.st_dev, st.st_uid, st.st_gid,
                               stat.S_IMODE(st.st_mode)))

    def test_directory(self):
        result, key, record = rationalise._probe("dir", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_DIR)
        self.assertIsNone(record)

    def test_missing(self):
        result, key, record = rationalise._probe("nothing", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_MISSING)

    @unittest.skipUnless(hasattr(os, "mkfifo"), "needs fifo support")
    def test_special_file(self):
        os.mkfifo("fifo")
        result, key, record = rationalise._probe("fifo", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_MISSING)

    def test_symlinks_not_followed(self):
        for name in ("link_to_file", "link_to_dir", "dangling"):
            result, key, record = rationalise._probe(name, ".", self.options)
            self.assertEqual(result, rationalise.PROBE_MISSING)

    def test_symlinks_followed(self):
        self.options.follow_symlinks = True
        result, key, record = rationalise._probe("link_to_file", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_REGULAR)
        self.assertEqual(record.name, "link_to_file")
        self.assertEqual(record.inode, get_inode("dir/a"))

        result, key, record = rationalise._probe("link_to_dir", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_DIR)

        result, key, record = rationalise._probe("dangling", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_MISSING)

    def test_ignore_empty(self):
        result, key, record = rationalise._probe("empty", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_REGULAR)
        self.options.ignore_empty = True
        result, key, record = rationalise._probe("empty", ".", self.options)
        self.assertEqual(result, rationalise.PROBE_MISSING)


class TestReplaceWithLink(BaseTests):
    def setUp(self):
        self.setup_tempdir()
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        self.rat = rationalise.Rationaliser(rationalise.default_options())

    def test_success(self):
        status = self.rat._replace_with_link("a", "b")
        self.assertEqual(status, rationalise.LINK_SUCCESS)
        self.assertEqual(get_inode("a"), get_inode("b"))
        self.assertEqual(os.lstat("a").st_nlink, 2)
        self.assertEqual(self.leftover_files(), set())
        self.verify_file_contents()

    def test_verbose_success(self):
        self.rat.options.verbose = True
        with mock.patch('sys.stdout', new_callable=io.StringIO) as out:
            self.rat._replace_with_link("a", "b")
        self.assertEqual(out.getvalue(), "linking b to a\n")

    def test_dry_run(self):
        before = self.inodes()
        self.rat.options.noexec = True
        with mock.patch('sys.stdout', new_callable=io.StringIO) as out:
            status = self.rat._replace_with_link("a", "b")
        self.assertEqual(status, rationalise.LINK_SUCCESS)
        self.assertEqual(out.getvalue(), "link b to a\n")
        self.assertEqual(self.inodes(), before)

    def test_rename_fails(self):
        before = self.inodes()
        with mock.patch('os.rename', side_effect=OSError(errno.EACCES, "Permission denied")):
            status = self.rat._replace_with_link("a", "b")
        self.assertEqual(status, rationalise.LINK_TRANSIENT_FAIL)
        self.assertEqual(self.inodes(), before)
        self.assertEqual(self.leftover_files(), set())
        self.verify_file_contents()

    def test_link_fails_and_original_restored(self):
        before = self.inodes()
        with mock.patch('os.link', side_effect=OSError(errno.EXDEV, "Invalid cross-device link")):
            status = self.rat._replace_with_link("a", "b")
        self.assertEqual(status, rationalise.LINK_TRANSIENT_FAIL)
        self.assertEqual(self.inodes(), before)
        self.assertEqual(self.leftover_files(), set())
        self.verify_file_contents()

    def test_link_and_restore_fail(self):
        real_rename = os.rename
        calls = []

        def rename_once(src, dst):
            calls.append((src, dst))
            if len(calls) > 1:
                raise OSError(errno.EACCES, "Permission denied")
            real_rename(src, dst)

        b_inode = get_inode("b")
        with mock.patch('os.rename', side_effect=rename_once):
            with mock.patch('os.link', side_effect=OSError(errno.EMLINK, "Too many links")):
                with self.assertLogs(level='CRITICAL') as logs:
                    status = self.rat._replace_with_link("a", "b")

        self.assertEqual(status, rationalise.LINK_CATASTROPHIC)
        self.assertFalse(os.path.exists("b"))
        saved = calls[0][1]
        self.assertTrue(saved.startswith("b"))
        self.assertIn(saved, logs.output[0])
        # The original survives under the saved name
        self.assertEqual(get_inode(saved), b_inode)
        with open(saved, 'rb') as f:
            self.assertEqual(f.read(), testdata3)

    def test_unlink_of_saved_copy_fails(self):
        with mock.patch('os.unlink', side_effect=OSError(errno.EBUSY, "Busy")):
            with self.assertLogs(level='ERROR') as logs:
                status = self.rat._replace_with_link("a", "b")
        self.assertEqual(status, rationalise.LINK_SUCCESS)
        self.assertEqual(get_inode("a"), get_inode("b"))
        self.assertIn("cannot remove temporary file", logs.output[0])

    def test_saved_name_already_exists(self):
        saved = rationalise._saved_copy_name("b")
        with mock.patch('rationalise._saved_copy_name', return_value=saved):
            self.make_file(saved, testdata1)
            before = self.inodes()
            status = self.rat._replace_with_link("a", "b")
        self.assertEqual(status, rationalise.LINK_TRANSIENT_FAIL)
        self.assertEqual(self.inodes(), before)
        self.verify_file_contents()

    def test_priority_restored(self):
        with mock.patch('rationalise._raise_priority', return_value=7) as raised:
            with mock.patch('rationalise._restore_priority') as restored:
                with mock.patch('os.link', side_effect=OSError(errno.EXDEV, "Invalid cross-device link")):
                    self.rat._replace_with_link("a", "b")
        raised.assert_called_once_with()
        restored.assert_called_once_with(7)


class TestScenarios(BaseTests):
    def test_basic_dedup(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)

        output = run_rat("-v")

        self.verify_file_contents()
        self.assertEqual(get_inode("a"), get_inode("b"))
        self.assertEqual(output, "linking b to a\n")

    def test_already_linked(self):
        self.make_file("a", testdata3)
        self.make_linked_file("a", "b")

        options = rationalise.default_options()
        options.verbose = True
        with mock.patch('os.rename') as rename, mock.patch('os.link') as link, \
             mock.patch('os.unlink') as unlink, \
             mock.patch('sys.stdout', new_callable=io.StringIO) as out:
            stats = rationalise.Rationaliser(options).run()

        self.assertEqual(out.getvalue(), "")
        self.assertFalse(rename.called or link.called or unlink.called)
        self.assertEqual(stats.comparisons, 0)
        self.assertEqual(stats.hardlinked_previously, 1)
        self.assertEqual(stats.hardlinked_thisrun, 0)

    def test_differ_by_one_byte(self):
        self.make_file("a", b"abc")
        self.make_file("b", b"abd")

        output = run_rat("-v")

        self.verify_file_contents()
        self.assertNotEqual(get_inode("a"), get_inode("b"))
        self.assertEqual(output, "")

    def test_different_sizes_not_compared(self):
        self.make_file("a", b"abc")
        self.make_file("b", b"abcd")

        stats = rationalise.Rationaliser().run(["a", "b"])

        self.assertEqual(stats.num_classes, 2)
        self.assertEqual(stats.comparisons, 0)
        self.assertNotEqual(get_inode("a"), get_inode("b"))

    def test_three_identical_files(self):
        self.make_file("a", b"x")
        self.make_file("b", b"x")
        self.make_file("c", b"x")

        stats = rationalise.Rationaliser().run()

        self.verify_file_contents()
        self.assertEqual(stats.hardlinked_thisrun, 2)
        self.assertEqual(stats.nlinks_to_zero_thisrun, 2)
        self.assertEqual(stats.bytes_saved_thisrun, 2)
        self.assertEqual(len(set(self.inodes().values())), 1)
        self.assertEqual(os.lstat("a").st_nlink, 3)

    def test_mixed_classes(self):
        self.make_file("a1", testdata1)
        self.make_file("a2", testdata1)
        self.make_file("b1", testdata2)
        self.make_file("b2", testdata2)
        self.make_file("c1", testdata3)

        run_rat()

        self.verify_file_contents()
        self.assertEqual(get_inode("a1"), get_inode("a2"))
        self.assertEqual(get_inode("b1"), get_inode("b2"))
        self.assertNotEqual(get_inode("a1"), get_inode("b1"))
        self.assertEqual(os.lstat("c1").st_nlink, 1)
        self.assertEqual(self.leftover_files(), set())

    def test_explicit_file_arguments(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        self.make_file("c", testdata3)

        run_rat("a", "c")

        self.assertEqual(get_inode("a"), get_inode("c"))
        self.assertNotEqual(get_inode("a"), get_inode("b"))

    @unittest.skipUnless(hasattr(os, "geteuid") and os.geteuid() == 0,
                         "changing file ownership requires root")
    def test_ignore_uid(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        os.chown("b", os.lstat("a").st_uid + 1, -1)

        run_rat()
        self.assertNotEqual(get_inode("a"), get_inode("b"))

        run_rat("-u")
        self.assertEqual(get_inode("a"), get_inode("b"))
        self.verify_file_contents()

    @unittest.skipUnless(hasattr(os, "geteuid") and os.geteuid() == 0,
                         "changing file ownership requires root")
    def test_ignore_gid(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        os.chown("b", -1, os.lstat("a").st_gid + 1)

        run_rat("-u")
        self.assertNotEqual(get_inode("a"), get_inode("b"))

        run_rat("-g")
        self.assertEqual(get_inode("a"), get_inode("b"))

    def test_ignore_perms(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        os.chmod("a", stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP)
        os.chmod("b", stat.S_IRUSR | stat.S_IWUSR)

        run_rat("-ug")
        self.assertNotEqual(get_inode("a"), get_inode("b"))

        run_rat("-p")
        self.assertEqual(get_inode("a"), get_inode("b"))
        self.verify_file_contents()

    def test_ignore_empty(self):
        self.make_file("a", testdata0)
        self.make_file("b", testdata0)

        run_rat("-z")
        self.assertNotEqual(get_inode("a"), get_inode("b"))

        run_rat()
        self.assertEqual(get_inode("a"), get_inode("b"))

    def test_dry_run(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        self.make_file("c", testdata3)
        self.make_file("d", testdata1)
        before = dict((p, os.lstat(p)) for p in self.file_contents)

        output = run_rat("-n")

        self.assertEqual(output, "link b to a\nlink c to a\n")
        for pathname, st in before.items():
            after = os.lstat(pathname)
            self.assertEqual(after.st_ino, st.st_ino)
            self.assertEqual(after.st_nlink, st.st_nlink)
        self.assertEqual(self.leftover_files(), set())

    def test_idempotent(self):
        self.make_file("a", testdata1)
        self.make_file("b", testdata1)
        self.make_file("c", testdata2)
        self.make_file("d", testdata2)
        self.make_file("e", testdata3)

        run_rat()
        first = self.inodes()
        output = run_rat("-v")

        self.assertEqual(output, "")
        self.assertEqual(self.inodes(), first)

    def test_nlink_order_keeps_shared_inode(self):
        """The file with fewer links is the one replaced."""
        self.make_file("a", testdata3)
        self.make_file("outside/b", testdata3)
        self.make_linked_file("outside/b", "b")
        b_inode = get_inode("b")

        output = run_rat("-v", "a", "b")

        self.verify_file_contents()
        self.assertEqual(output, "linking a to b\n")
        self.assertEqual(get_inode("a"), b_inode)
        self.assertEqual(os.lstat("outside/b").st_nlink, 3)

    def test_linked_pivot_is_tracked(self):
        """After the pivot itself is relinked, files already sharing its new
        inode are recognised without another link."""
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        self.make_linked_file("b", "c")

        options = rationalise.default_options()
        stats = rationalise.Rationaliser(options).run(["a", "b", "c"])

        self.assertEqual(len(set(self.inodes().values())), 1)
        self.assertEqual(stats.hardlinked_thisrun, 1)
        self.assertEqual(stats.hardlinked_previously, 1)

    def test_transient_failure_retries_other_direction(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        rat = rationalise.Rationaliser()
        real_replace = rat._replace_with_link
        calls = []

        def fail_first(from_pathname, to_pathname):
            calls.append((from_pathname, to_pathname))
            if len(calls) == 1:
                return rationalise.LINK_TRANSIENT_FAIL
            return real_replace(from_pathname, to_pathname)

        rat._replace_with_link = fail_first
        stats = rat.run(["a", "b"])

        self.assertEqual(calls, [("a", "b"), ("b", "a")])
        self.assertEqual(get_inode("a"), get_inode("b"))
        self.assertEqual(stats.transient_failures, 1)
        self.assertEqual(stats.hardlinked_thisrun, 1)

    def test_catastrophic_failure_not_retried(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        rat = rationalise.Rationaliser()
        calls = []

        def fail_badly(from_pathname, to_pathname):
            calls.append((from_pathname, to_pathname))
            return rationalise.LINK_CATASTROPHIC

        rat._replace_with_link = fail_badly
        a = rationalise.FileRecord("a", ".", get_inode("a"))
        b = rationalise.FileRecord("b", ".", get_inode("b"))

        self.assertTrue(rat._try_link(a, b, len(testdata3)))
        self.assertEqual(calls, [("a", "b")])
        self.assertEqual(rat.stats.catastrophic_failures, 1)
        self.assertEqual(rat.stats.transient_failures, 0)

    def test_repeated_name_linked_once(self):
        """A name given twice is not relinked after its first record was."""
        self.make_file("a", testdata3)
        os.mkdir("outside")
        self.make_file("outside/b", testdata3)
        self.make_linked_file("outside/b", "b")
        real_rename = os.rename

        with mock.patch('os.rename', side_effect=real_rename) as rename:
            stats = rationalise.Rationaliser().run(["a", "b", "a"])

        self.assertEqual(rename.call_count, 1)
        self.assertEqual(get_inode("a"), get_inode("b"))
        self.assertEqual(stats.hardlinked_thisrun, 1)
        self.assertEqual(stats.transient_failures, 0)
        self.assertEqual(self.leftover_files(), set())

    def test_stale_inode_recognised_as_linked(self):
        """Records whose cached inodes are out of date are checked against
        the file system before their contents are compared."""
        self.make_file("a", testdata3)
        self.make_linked_file("a", "b")
        rat = rationalise.Rationaliser()
        a = rationalise.FileRecord("a", ".", -1)
        b = rationalise.FileRecord("b", ".", -2)

        self.assertTrue(rat._try_link(a, b, len(testdata3)))
        self.assertEqual(rat.stats.comparisons, 0)
        self.assertEqual(rat.stats.hardlinked_previously, 1)
        self.assertEqual(a.inode, get_inode("b"))
        self.assertEqual(b.inode, get_inode("a"))

    def test_unlinkable_file_is_dropped(self):
        """Identical files that cannot be linked either way are not retried."""
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        self.make_file("c", testdata3)
        rat = rationalise.Rationaliser()
        with mock.patch('os.link', side_effect=OSError(errno.EPERM, "Operation not permitted")):
            stats = rat.run()

        self.verify_file_contents()
        self.assertEqual(stats.hardlinked_thisrun, 0)
        # a/b and a/c each fail both ways, and both are dropped
        self.assertEqual(stats.transient_failures, 4)
        self.assertEqual(stats.comparisons, 2)
        self.assertEqual(self.leftover_files(), set())

    def test_unreadable_files_not_linked(self):
        if hasattr(os, "geteuid") and os.geteuid() == 0:
            self.skipTest("root can read any file")
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        os.chmod("b", 0)
        os.chmod("a", 0)

        stats = rationalise.Rationaliser().run()

        self.assertEqual(stats.unreadable_comparisons, 1)
        self.assertNotEqual(get_inode("a"), get_inode("b"))

    def test_debug_prints_stats(self):
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        root_logger = logging.getLogger()
        level = root_logger.level
        try:
            with self.assertLogs(level='DEBUG'):
                output = run_rat("-d")
        finally:
            root_logger.setLevel(level)
        self.assertIn("Rationalise statistics", output)
        self.assertIn("Hardlinked this run        : 1", output)


class TestDirectories(BaseTests):
    def setUp(self):
        self.setup_tempdir()
        self.make_file("top1", testdata1)
        self.make_file("dir1/name1", testdata1)
        self.make_file("dir1/name2", testdata2)
        self.make_file("dir1/sub/name1", testdata1)
        self.make_file("dir2/name2", testdata2)

    def test_no_recursion(self):
        run_rat()
        self.verify_file_contents()
        for pathname in ("top1", "dir1/name1", "dir1/sub/name1", "dir2/name2"):
            self.assertEqual(os.lstat(pathname).st_nlink, 1)

    def test_directory_arguments(self):
        run_rat("dir1", "dir2")
        self.verify_file_contents()
        self.assertEqual(get_inode("dir1/name2"), get_inode("dir2/name2"))
        self.assertEqual(os.lstat("dir1/name1").st_nlink, 1)

    def test_recursion(self):
        run_rat("-r")
        self.verify_file_contents()
        self.assertEqual(get_inode("top1"), get_inode("dir1/name1"))
        self.assertEqual(get_inode("top1"), get_inode("dir1/sub/name1"))
        self.assertEqual(get_inode("dir1/name2"), get_inode("dir2/name2"))
        self.assertEqual(self.leftover_files(), set())

    def test_absolute_paths(self):
        output = run_rat("-rv", self.root)
        self.assertEqual(get_inode("top1"), get_inode("dir1/sub/name1"))
        for line in output.splitlines():
            self.assertTrue(line.startswith("linking " + self.root + "/"))

    def test_symlinked_directory(self):
        os.symlink(os.path.join(self.root, "dir2"), "dir1/sub/to_dir2")
        self.make_file("dir2/name1", testdata1)

        run_rat("-r", "dir1")
        self.assertNotEqual(get_inode("dir1/name1"), get_inode("dir2/name1"))

        run_rat("-rs", "dir1")
        self.assertEqual(get_inode("dir1/name1"), get_inode("dir2/name1"))
        self.assertTrue(os.path.islink("dir1/sub/to_dir2"))
        self.verify_file_contents()

    def test_symlink_loop_terminates(self):
        os.symlink("..", "dir1/sub/up")
        run_rat("-rs")
        self.verify_file_contents()
        self.assertEqual(get_inode("top1"), get_inode("dir1/sub/name1"))

    def test_unlistable_directory(self):
        if hasattr(os, "geteuid") and os.geteuid() == 0:
            self.skipTest("root can list any directory")
        os.chmod("dir2", 0)
        with self.assertLogs(level='ERROR') as logs:
            run_rat("-r")
        self.assertIn("cannot open directory dir2", logs.output[0])
        os.chmod("dir2", stat.S_IRWXU)
        self.assertEqual(get_inode("top1"), get_inode("dir1/name1"))
        self.assertEqual(os.lstat("dir2/name2").st_nlink, 1)


class TestListFile(BaseTests):
    def setUp(self):
        self.setup_tempdir()
        self.make_file("a", testdata3)
        self.make_file("b", testdata3)
        self.make_file("c", testdata3)

    def test_list_file(self):
        with open("paths.list", 'w') as f:
            f.write("a\n\nc\n")
        run_rat("-f", "paths.list")
        self.assertEqual(get_inode("a"), get_inode("c"))
        self.assertNotEqual(get_inode("a"), get_inode("b"))

    def test_list_from_stdin(self):
        with mock.patch('sys.stdin', io.StringIO("b\nc\n")):
            run_rat("-f", "-")
        self.assertEqual(get_inode("b"), get_inode("c"))
        self.assertNotEqual(get_inode("a"), get_inode("b"))

    def test_empty_list_links_nothing(self):
        with mock.patch('sys.stdin', io.StringIO("")):
            run_rat("-f", "-")
        self.assertEqual(len(set(self.inodes().values())), 3)

    def test_unreadable_list_file(self):
        with self.assertRaises(SystemExit) as cm:
            run_rat("-f", "no-such-list")
        self.assertEqual(cm.exception.code, 1)

    def test_overlong_line(self):
        too_long = "x" * (rationalise.MAX_PATH_LINE + 1)
        with mock.patch('sys.stdin', io.StringIO("a\n%s\nb\n" % too_long)):
            with self.assertRaises(SystemExit) as cm:
                run_rat("-f", "-")
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(len(set(self.inodes().values())), 3)

    @unittest.skipUnless(utf8_filenames, "needs a UTF-8 file system encoding")
    def test_overlong_encoded_line(self):
        # fewer characters than the limit, but more bytes
        too_long = "é" * (rationalise.MAX_PATH_LINE // 2 + 1)
        self.assertLessEqual(len(too_long), rationalise.MAX_PATH_LINE)
        with mock.patch('sys.stdin', io.StringIO("a\n%s\nb\n" % too_long)):
            with self.assertRaises(SystemExit) as cm:
                run_rat("-f", "-")
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(len(set(self.inodes().values())), 3)

    def test_read_path_list(self):
        with mock.patch('sys.stdin', io.StringIO("one\n\ntwo words\nthree")):
            self.assertEqual(rationalise.read_path_list("-"),
                             ["one", "two words", "three"])

    @unittest.skipUnless(utf8_filenames and sys.platform.startswith("linux"),
                         "needs byte-string file names")
    def test_undecodable_names_from_stdin(self):
        odd_name = os.fsdecode(b"caf\xe9")
        self.make_file(odd_name, testdata3)
        raw = io.BytesIO(b"b\ncaf\xe9\n")
        stdin = io.TextIOWrapper(raw, encoding='utf-8', errors='strict')

        with mock.patch('sys.stdin', stdin):
            run_rat("-f", "-")

        self.assertEqual(get_inode("b"), get_inode(odd_name))
        self.assertTrue(os.path.exists(b"caf\xe9"))
        self.verify_file_contents()

    @unittest.skipUnless(utf8_filenames and sys.platform.startswith("linux"),
                         "needs byte-string file names")
    def test_undecodable_names_in_list_file(self):
        with open("paths.list", 'wb') as f:
            f.write(b"a\ncaf\xe9\n")
        self.assertEqual(rationalise.read_path_list("paths.list"),
                         ["a", os.fsdecode(b"caf\xe9")])


class TestCommandLine(unittest.TestCase):
    def test_bad_flag(self):
        with mock.patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                rationalise.main(["-x"])
        self.assertEqual(cm.exception.code, 1)

    def test_list_file_with_paths(self):
        with mock.patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                rationalise.main(["-f", "list", "a"])
        self.assertEqual(cm.exception.code, 1)

    def test_combined_flags(self):
        options, args = rationalise._parse_command_line(["-vrsugpz", "x", "y"])
        self.assertTrue(options.verbose)
        self.assertTrue(options.recursive)
        self.assertTrue(options.follow_symlinks)
        self.assertTrue(options.ignore_uid)
        self.assertTrue(options.ignore_gid)
        self.assertTrue(options.ignore_perm)
        self.assertTrue(options.ignore_empty)
        self.assertFalse(options.noexec)
        self.assertEqual(args, ["x", "y"])

    def test_dry_run_implies_verbose(self):
        options, args = rationalise._parse_command_line(["-n"])
        self.assertTrue(options.noexec)
        self.assertTrue(options.verbose)
        self.assertEqual(args, [])

    def test_out_of_memory(self):
        with mock.patch.object(rationalise.Rationaliser, 'run', side_effect=MemoryError):
            with self.assertRaises(SystemExit) as cm:
                rationalise.main(["."])
        self.assertEqual(cm.exception.code, 1)


@unittest.skip("Differing device tests require manual setup")
class TestDifferentDevices(BaseTests):
    def setUp(self):
        self._saved_cwd = os.getcwd()
        self.file_contents = {}

        # These two variables need to be set to point to directories on
        # different devices (ie. different filesystems).
        DEVICE1_DIR_PATH = None  # requires manual setup
        DEVICE2_DIR_PATH = None  # set to a different filesystem than above

        assert DEVICE1_DIR_PATH
        assert DEVICE2_DIR_PATH

        self.root = tempfile.mkdtemp(dir=DEVICE1_DIR_PATH)
        self.dev2_root = tempfile.mkdtemp(dir=DEVICE2_DIR_PATH)
        os.chdir(self.root)

    def tearDown(self):
        shutil.rmtree(self.dev2_root)
        BaseTests.tearDown(self)

    def test_differing_devices_no_link(self):
        path_a = os.path.join(self.root, 'a')
        path_b = os.path.join(self.dev2_root, 'b')
        self.make_file(path_a, testdata3)
        self.make_file(path_b, testdata3)
        stat_a = os.lstat(path_a)
        stat_b = os.lstat(path_b)

        stats = rationalise.Rationaliser().run([path_a, path_b])

        # Separate classes, so the contents are never even read
        self.assertEqual(stats.comparisons, 0)
        self.assertEqual(stat_a, os.lstat(path_a))
        self.assertEqual(stat_b, os.lstat(path_b))


if __name__ == '__main__':
    unittest.main(buffer=True)
