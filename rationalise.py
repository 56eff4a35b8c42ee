#!/usr/bin/env python

# rationalise - Rationalises a list of files by changing multiple identical
# copies into hard links to the same file.  Directory arguments contribute
# their contents, optionally recursively.
#
# Copyright 2026  The rationalise authors
#
# This program is free software; you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation; either version 2 of the License, or (at your option) any later
# version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
# details.
#
# You should have received a copy of the GNU General Public License along with
# this program; if not, write to the Free Software Foundation, Inc., 59 Temple
# Place, Suite 330, Boston, MA  02111-1307, USA.

import logging as _logging
import os as _os
import stat as _stat
import sys as _sys
import time as _time

from collections import namedtuple as _namedtuple
from optparse import OptionParser as _OptionParser
from optparse import OptionGroup as _OptionGroup
from optparse import SUPPRESS_HELP as _SUPPRESS_HELP
from optparse import TitledHelpFormatter as _TitledHelpFormatter

__all__ = ["Rationaliser", "RationaliseStats", "ClassIndex", "EquivalenceClass",
           "FileRecord", "ClassKey", "default_options", "read_path_list", "main"]

# global declarations
__version__ = '1.0'
_VERSION = "1.0 - 2026-10-18 (18-Oct-2026)"

# Results of probing a candidate pathname
PROBE_MISSING = -1
PROBE_REGULAR = 0
PROBE_DIR = 1

# Results of comparing the contents of two files
COMPARE_SAME = 0
COMPARE_DIFFERENT = 1
COMPARE_UNREADABLE = -1

# Results of replacing a file with a hard link
LINK_SUCCESS = 1
LINK_TRANSIENT_FAIL = 0
LINK_CATASTROPHIC = -1

# Same buffer size as filecmp
COMPARE_BUFSIZE = 8 * 1024

# Longest pathname accepted from a list file
MAX_PATH_LINE = 4096

# Scheduling priority held while a target is renamed aside (superuser only)
CRITICAL_PRIORITY = -20

_PERM_BITS = 0o7777

_CAN_RENICE = (hasattr(_os, 'getpriority') and
               hasattr(_os, 'setpriority') and
               hasattr(_os, 'geteuid'))


class _RatOptionParser(_OptionParser):
    """OptionParser whose usage errors exit with status 1."""
    def error(self, msg):
        self.print_usage(_sys.stderr)
        self.exit(1, "%s: error: %s\n" % (self.get_prog_name(), msg))


def _parse_command_line(args=None, get_default_options=False):
    usage = "usage: %prog [-vnrsugpz] [-f listfile] [file|directory ...]"
    version = "%prog: " + _VERSION
    description = """\
Rationalise a list of files by changing identical copies into hard links to a
single file.  The contents of any directory argument are included in the list.
With no arguments, the contents of the current directory are rationalised."""

    formatter = _TitledHelpFormatter(max_help_position=26)
    parser = _RatOptionParser(usage=usage,
                              version=version,
                              description=description,
                              formatter=formatter)
    parser.add_option("-v", "--verbose", dest="verbose",
                      help="Print the names of files as they are linked",
                      action="store_true", default=False,)

    parser.add_option("-n", "--dry-run", dest="noexec",
                      help="Print the links that would be made, but make none",
                      action="store_true", default=False,)

    parser.add_option("-r", "--recursive", dest="recursive",
                      help="Recurse down through subdirectories",
                      action="store_true", default=False,)

    parser.add_option("-s", "--follow-symlinks", dest="follow_symlinks",
                      help="Follow symbolic links to files (and directories with -r)",
                      action="store_true", default=False,)

    parser.add_option("-f", "--file-list", dest="list_file", metavar="FILE",
                      help="Read pathnames, one per line, from FILE ('-' is stdin)",
                      default=None,)

    # hidden debug option, each repeat increases debug level
    parser.add_option("-d", "--debug", dest="debug_level",
                      help=_SUPPRESS_HELP,
                      action="count", default=0,)

    group = _OptionGroup(parser, title="File Matching", description="""\
File content must always match exactly to be linked.  Files that are linked
share one owner and one set of permissions afterwards, so ignoring them can
leave a file owned by another user.
""")
    parser.add_option_group(group)

    group.add_option("-u", "--ignore-uid", dest="ignore_uid",
                     help="File owners do not need to match",
                     action="store_true", default=False,)

    group.add_option("-g", "--ignore-gid", dest="ignore_gid",
                     help="File groups do not need to match",
                     action="store_true", default=False,)

    group.add_option("-p", "--ignore-perms", dest="ignore_perm",
                     help="File permissions do not need to match",
                     action="store_true", default=False,)

    group.add_option("-z", "--ignore-empty", dest="ignore_empty",
                     help="Skip zero length files",
                     action="store_true", default=False,)

    # Allow for a way to get a default options object (for library use)
    if get_default_options:
        (options, args) = parser.parse_args([])
        options_validation(options)
        return options

    (options, args) = parser.parse_args(args)
    if options.list_file is not None and args:
        parser.error("pathnames cannot be given together with -f")

    options_validation(options)

    return options, args


def options_validation(options):
    if options.debug_level > 0:
        _logging.getLogger().setLevel(_logging.DEBUG)

    # A dry run reports what it would do
    if options.noexec:
        options.verbose = True


def default_options():
    """Return an options object holding every command line default."""
    return _parse_command_line(get_default_options=True)


ClassKey = _namedtuple("ClassKey", ["size", "device", "uid", "gid", "perms"])


class FileRecord:
    """One regular file that is a candidate for linking."""
    def __init__(self, name, dirname, inode):
        self.name = name        # pathname used for all file operations
        self.dirname = dirname  # directory the name was found in (may be None)
        self.inode = inode      # st_ino when probed, updated after relinking

    def __repr__(self):
        return "FileRecord(%r, %r, %r)" % (self.name, self.dirname, self.inode)


class EquivalenceClass:
    """Files which may be identical.  Every member agrees with the class on
    size and device, and on each of uid, gid and perms that is not ignored."""
    def __init__(self, key):
        self.size = key.size
        self.device = key.device
        self.uid = key.uid
        self.gid = key.gid
        self.perms = key.perms
        self.members = []

    def __len__(self):
        return len(self.members)

    def __iter__(self):
        return iter(self.members)


class ClassIndex:
    """Partition of the candidate files into equivalence classes.

    Only cheap stat() metadata is used to place a file, so a class is a set of
    files that *might* be identical.  The contents are compared later."""
    def __init__(self, options):
        self.options = options
        # masked ClassKey -> EquivalenceClass, in order of creation
        self._classes = {}

    def _masked_key(self, key):
        """Return key with the ignored components blanked out."""
        options = self.options
        return (key.size,
                key.device,
                None if options.ignore_uid else key.uid,
                None if options.ignore_gid else key.gid,
                None if options.ignore_perm else key.perms)

    def insert(self, record, key):
        """Add record to the class matching key.  Returns True when a new
        class had to be created for it."""
        masked_key = self._masked_key(key)
        eqclass = self._classes.get(masked_key, None)
        created = eqclass is None
        if created:
            eqclass = EquivalenceClass(key)
            self._classes[masked_key] = eqclass
        elif self.options.debug_level > 1:
            _logging.debug("associating %s with %s" % (eqclass.members[0].name, record.name))
        eqclass.members.append(record)
        return created

    def __len__(self):
        return len(self._classes)

    def __iter__(self):
        return iter(self._classes.values())


class Rationaliser:
    def __init__(self, options=None):
        if options is None:
            options = default_options()
        self.options = options
        self.stats = RationaliseStats(options)
        self.index = ClassIndex(options)
        # (st_dev, st_ino) of every directory already listed
        self._visited_dirs = set()

    def run(self, paths=None):
        """Rationalise the given files and directories.  Return stats."""
        # Prevent a single pathname from being iterated character by character
        if isinstance(paths, str):
            paths = [paths]
        if paths is None:
            paths = ["."]

        self._associate(paths)

        _logging.debug("apply")
        for eqclass in self.index:
            self._combine(eqclass)

        self.stats.print_stats()
        return self.stats

    def _associate(self, paths):
        """Enter each pathname into the index, and the contents of those that
        are directories."""
        _logging.debug("associate")
        for pathname in paths:
            if self._enter(pathname, ".") == PROBE_DIR:
                self._enter_dir(pathname)

    def _enter_dir(self, top_dir):
        """Enter the files within top_dir.  Subdirectories are only descended
        into with the recursive option."""
        pending = [top_dir]
        while pending:
            dirname = pending.pop()
            if self._already_visited(dirname):
                continue

            _logging.debug("enterdir(%s)" % dirname)
            try:
                names = _os.listdir(dirname)
            except OSError as error:
                _logging.error("cannot open directory %s [%s]" % (dirname, error))
                continue

            self.stats.found_directory()
            subdirs = []
            for name in sorted(names):
                if self._enter(name, dirname) == PROBE_DIR and self.options.recursive:
                    subdirs.append(_make_path(dirname, name))

            # Depth first, in name order
            pending.extend(reversed(subdirs))

    def _already_visited(self, dirname):
        # Symlinked directories can form loops, so directories are identified
        # by what they resolve to
        try:
            stat_info = _os.stat(dirname)
        except OSError:
            return False
        dir_id = (stat_info.st_dev, stat_info.st_ino)
        if dir_id in self._visited_dirs:
            _logging.debug("already visited %s" % dirname)
            return True
        self._visited_dirs.add(dir_id)
        return False

    def _enter(self, filename, dirname):
        """Probe a file and add it to the index if it is a regular file.
        Returns the probe result."""
        if self.options.debug_level > 1:
            _logging.debug("enter(%s, %s)" % (filename, dirname))

        result, key, record = _probe(filename, dirname, self.options)
        if result == PROBE_REGULAR:
            self.stats.found_regular_file(record.name)
            if self.index.insert(record, key):
                self.stats.found_class()
        return result

    def _combine(self, eqclass):
        """Link together all the identical files in an equivalence class.

        The first remaining file is tried against every other one.  Those it
        was linked with (or which could not be linked at all) are dropped, the
        rest keep their order, and the next round starts from the first of
        them.  Ends once fewer than two files remain."""
        _logging.debug("combine")
        members = list(eqclass.members)
        while len(members) > 1:
            pivot = members[0]
            survivors = []
            for candidate in members[1:]:
                if not self._try_link(pivot, candidate, eqclass.size):
                    survivors.append(candidate)
            members = survivors

    def _try_link(self, a, b, size):
        """Link a and b if their contents are identical.

        Returns True when the files are now linked, were already linked, or
        are identical but could not be linked in either direction (retrying
        later in this run would fail the same way).  Returns False only when
        the files differ or cannot be read."""
        if self.options.debug_level > 1:
            _logging.debug("replace(%s, %s)" % (a.name, b.name))

        if a.inode == b.inode or a.name == b.name:
            self.stats.found_existing_hardlink(a.name, b.name)
            return True

        # The cached inodes go stale once either name has been replaced by a
        # link through another record.
        a_id, b_id = _file_identity(a.name), _file_identity(b.name)
        if a_id is not None and a_id == b_id:
            a.inode = b.inode = a_id[1]
            self.stats.found_existing_hardlink(a.name, b.name)
            return True

        result = _compare_files(a.name, b.name)
        self.stats.did_comparison(a.name, b.name, result)
        if result != COMPARE_SAME:
            return False

        src, dst = _link_direction(a, b)
        if self._relink_record(src, dst, size) == LINK_TRANSIENT_FAIL:
            self._relink_record(dst, src, size)

        return True

    def _relink_record(self, src, dst, size):
        """Replace dst with a link to src, keeping the records current."""
        dst_nlink = _link_count(dst.name)
        status = self._replace_with_link(src.name, dst.name)
        if status == LINK_SUCCESS:
            self.stats.did_hardlink(src.name, dst.name, size, dst_nlink)
            dst.inode = src.inode
        else:
            self.stats.failed_hardlink(src.name, dst.name, status)
        return status

    def _replace_with_link(self, from_pathname, to_pathname):
        """Replace to_pathname with a hard link to from_pathname.

        The original is renamed aside first and only removed once the new
        link exists, so neither file can be lost.  Returns LINK_SUCCESS,
        LINK_TRANSIENT_FAIL when everything is back as it was, or
        LINK_CATASTROPHIC when the original could not be put back and now
        only exists under the saved name."""
        if self.options.noexec:
            print("link %s to %s" % (to_pathname, from_pathname))
            return LINK_SUCCESS

        saved_pathname = _saved_copy_name(to_pathname)
        if _os.path.lexists(saved_pathname):
            _logging.debug("temporary name %s already exists" % saved_pathname)
            return LINK_TRANSIENT_FAIL

        old_priority = _raise_priority()
        try:
            status = _link_aside(from_pathname, to_pathname, saved_pathname)
        finally:
            _restore_priority(old_priority)

        # only print out what we are doing once it has succeeded
        if status == LINK_SUCCESS and self.options.verbose:
            print("linking %s to %s" % (to_pathname, from_pathname))
        return status


class RationaliseStats:
    def __init__(self, options):
        self.options = options
        self.reset()

    def reset(self):
        self.dircount = 0                   # how many directories we list
        self.regularfiles = 0               # how many regular files we find
        self.num_classes = 0                # how many equivalence classes
        self.comparisons = 0                # how many file content comparisons
        self.equal_comparisons = 0          # how many comparisons found equal
        self.unreadable_comparisons = 0     # comparisons that could not read a file
        self.hardlinked_previously = 0      # pairs found already linked
        self.hardlinked_thisrun = 0         # links made this run
        self.nlinks_to_zero_thisrun = 0     # replaced files whose inode was freed
        self.bytes_saved_thisrun = 0        # bytes freed by linking this run
        self.transient_failures = 0         # replacements rolled back
        self.catastrophic_failures = 0      # originals left under a saved name
        self.hardlinkpairs = []             # (from, to) pathnames linked this run
        self.starttime = _time.time()       # track how long it takes

    def found_directory(self):
        self.dircount += 1

    def found_regular_file(self, pathname):
        self.regularfiles += 1
        if self.options.debug_level > 2:
            _logging.debug("File          : %s" % pathname)

    def found_class(self):
        self.num_classes += 1

    def did_comparison(self, pathname1, pathname2, result):
        self.comparisons += 1
        if result == COMPARE_SAME:
            self.equal_comparisons += 1
        elif result == COMPARE_UNREADABLE:
            self.unreadable_comparisons += 1
        if self.options.debug_level > 1:
            if result == COMPARE_SAME:
                _logging.debug("Compared equal: %s" % pathname1)
            else:
                _logging.debug("Compared      : %s" % pathname1)
            _logging.debug(" to           : %s" % pathname2)

    def found_existing_hardlink(self, pathname1, pathname2):
        self.hardlinked_previously += 1
        if self.options.debug_level > 1:
            _logging.debug("Existing link : %s" % pathname1)
            _logging.debug(" with         : %s" % pathname2)

    def did_hardlink(self, src_pathname, dst_pathname, filesize, dst_nlink):
        self.hardlinked_thisrun += 1
        self.hardlinkpairs.append((src_pathname, dst_pathname))
        if dst_nlink == 1:
            # We only save bytes if the last link was actually removed.
            self.bytes_saved_thisrun += filesize
            self.nlinks_to_zero_thisrun += 1

    def failed_hardlink(self, src_pathname, dst_pathname, status):
        if status == LINK_CATASTROPHIC:
            self.catastrophic_failures += 1
        else:
            self.transient_failures += 1
            _logging.debug("Not linked    : %s" % dst_pathname)
            _logging.debug(" to           : %s" % src_pathname)

    def print_stats(self):
        if self.options.debug_level < 1:
            return

        print("Rationalise statistics")
        print("----------------------")
        if self.options.noexec:
            print("Statistics reflect what would result if linking were enabled")
        print("Directories                : %s" % self.dircount)
        print("Files                      : %s" % self.regularfiles)
        print("Equivalence classes        : %s" % self.num_classes)
        print("Comparisons                : %s" % self.comparisons)
        print("Equal comparisons          : %s" % self.equal_comparisons)
        print("Unreadable comparisons     : %s" % self.unreadable_comparisons)
        print("Existing hardlinks         : %s" % self.hardlinked_previously)
        if self.options.noexec:
            s1 = "Hardlinkable files found   : %s"
            s2 = "Additional linkable bytes  : %s (%s)"
        else:
            s1 = "Hardlinked this run        : %s"
            s2 = "Additional linked bytes    : %s (%s)"
        print(s1 % self.hardlinked_thisrun)
        print("Consolidated inodes        : %s" % self.nlinks_to_zero_thisrun)
        print(s2 % (self.bytes_saved_thisrun, _humanize_number(self.bytes_saved_thisrun)))
        print("Failed links (recovered)   : %s" % self.transient_failures)
        if self.catastrophic_failures:
            print("Failed links (SAVED COPIES): %s" % self.catastrophic_failures)
        print("Total run time             : %s seconds" % round(_time.time() - self.starttime, 3))


#################
# Module functions
#################

def _make_path(dirname, filename):
    """Join dirname and filename, leaving filename alone when dirname is
    empty or '.', or filename is absolute."""
    if not dirname or dirname == "." or filename.startswith("/"):
        return filename
    return dirname + "/" + filename


def _class_key(stat_info):
    return ClassKey(stat_info.st_size,
                    stat_info.st_dev,
                    stat_info.st_uid,
                    stat_info.st_gid,
                    stat_info.st_mode & _PERM_BITS)


def _probe(filename, dirname, options):
    """Classify a candidate file.

    Returns a (result, key, record) triple where result is PROBE_MISSING,
    PROBE_DIR or PROBE_REGULAR.  Only a regular file gets a ClassKey and a
    FileRecord, the others return None for both.  Anything that cannot be
    stat()-ed, or that is not a regular file or directory, is PROBE_MISSING.
    """
    pathname = _make_path(dirname, filename)

    try:
        stat_info = _os.lstat(pathname)
    except OSError:
        return PROBE_MISSING, None, None

    if _stat.S_ISLNK(stat_info.st_mode):
        if not options.follow_symlinks:
            return PROBE_MISSING, None, None
        # look at what it points to
        try:
            stat_info = _os.stat(pathname)
        except OSError:
            return PROBE_MISSING, None, None

    if _stat.S_ISDIR(stat_info.st_mode):
        return PROBE_DIR, None, None
    if not _stat.S_ISREG(stat_info.st_mode):
        return PROBE_MISSING, None, None

    if options.ignore_empty and stat_info.st_size == 0:
        return PROBE_MISSING, None, None

    record = FileRecord(pathname, dirname, stat_info.st_ino)
    return PROBE_REGULAR, _class_key(stat_info), record


def _compare_files(pathname1, pathname2):
    """Compare the contents of two files.

    Returns COMPARE_SAME, COMPARE_DIFFERENT, or COMPARE_UNREADABLE if either
    file cannot be opened or read.  The sizes are not consulted; the files
    are read to the end in step."""
    try:
        f1 = open(pathname1, 'rb')
    except OSError:
        return COMPARE_UNREADABLE

    try:
        f2 = open(pathname2, 'rb')
    except OSError:
        f1.close()
        return COMPARE_UNREADABLE

    try:
        while True:
            buf1 = f1.read(COMPARE_BUFSIZE)
            buf2 = f2.read(COMPARE_BUFSIZE)
            if buf1 != buf2:
                return COMPARE_DIFFERENT
            if not buf1:
                return COMPARE_SAME
    except OSError:
        return COMPARE_UNREADABLE
    finally:
        f1.close()
        f2.close()


def _link_count(pathname):
    """Return st_nlink of pathname, or None if it cannot be lstat()-ed."""
    try:
        return _os.lstat(pathname).st_nlink
    except OSError:
        return None


def _file_identity(pathname):
    """Return (st_dev, st_ino) of what pathname resolves to, or None."""
    try:
        st = _os.stat(pathname)
    except OSError:
        return None
    return (st.st_dev, st.st_ino)


def _link_direction(a, b):
    """Return (src, dst) records, where dst is the one to be replaced.

    Replacing the file with fewer links keeps the more widely shared inode.
    On a tie (or when a count is unavailable), b is replaced."""
    nlink_a = _link_count(a.name)
    nlink_b = _link_count(b.name)
    if nlink_a is not None and nlink_b is not None and nlink_a < nlink_b:
        return b, a
    return a, b


def _saved_copy_name(pathname):
    """Name the original is kept under while it is being replaced."""
    return "%s%04x%04x" % (pathname, _os.getpid() & 0xffff, int(_time.time()) & 0xffff)


def _link_aside(from_pathname, to_pathname, saved_pathname):
    """Move to_pathname to saved_pathname, link from_pathname in its place,
    and remove the saved copy.  Puts the original back if linking fails."""
    try:
        _os.rename(to_pathname, saved_pathname)
    except OSError as error:
        _logging.debug("rename(%s, %s) failed [%s]" % (to_pathname, saved_pathname, error))
        return LINK_TRANSIENT_FAIL

    try:
        _os.link(from_pathname, to_pathname)
    except OSError as error:
        _logging.debug("link(%s, %s) failed [%s]" % (from_pathname, to_pathname, error))
        # Try to recover
        try:
            _os.rename(saved_pathname, to_pathname)
        except OSError as error:
            _logging.critical("failed to link %s to %s - copy has been left on %s [%s]" %
                              (to_pathname, from_pathname, saved_pathname, error))
            return LINK_CATASTROPHIC
        return LINK_TRANSIENT_FAIL

    # this should never fail - we have only just created it
    try:
        _os.unlink(saved_pathname)
    except OSError as error:
        _logging.error("cannot remove temporary file %s [%s]" % (saved_pathname, error))

    return LINK_SUCCESS


def _raise_priority():
    """Run at the highest priority while a file is renamed aside.  Only has an
    effect for the superuser.  Returns the priority to restore, or None."""
    if not _CAN_RENICE or _os.geteuid() != 0:
        return None
    try:
        old_priority = _os.getpriority(_os.PRIO_PROCESS, 0)
        _os.setpriority(_os.PRIO_PROCESS, 0, CRITICAL_PRIORITY)
    except OSError as error:
        _logging.debug("cannot raise priority [%s]" % error)
        return None
    return old_priority


def _restore_priority(old_priority):
    if old_priority is None:
        return
    try:
        _os.setpriority(_os.PRIO_PROCESS, 0, old_priority)
    except OSError as error:
        _logging.debug("cannot restore priority %s [%s]" % (old_priority, error))


def read_path_list(list_filename):
    """Return the pathnames listed one per line in list_filename ('-' for
    standard input).  Blank lines are skipped.  An unreadable file or an
    overlong line is fatal.  Lines are read as bytes and decoded the way the
    file system decodes names, so any name found on disk can be listed."""
    if list_filename == "-":
        stdin = getattr(_sys.stdin, 'buffer', _sys.stdin)
        return _read_path_lines(stdin, "standard input")

    try:
        f = open(list_filename, 'rb')
    except OSError as error:
        _fatal("cannot open list file %s [%s]" % (list_filename, error))

    with f:
        return _read_path_lines(f, list_filename)


def _read_path_lines(f, list_name):
    paths = []
    try:
        for lineno, line in enumerate(f, 1):
            pathname = _os.fsdecode(line).rstrip("\n")
            # the limit is on the encoded name
            if len(_os.fsencode(pathname)) > MAX_PATH_LINE:
                _fatal("line %d of %s is too long" % (lineno, list_name))
            if pathname:
                paths.append(pathname)
    except OSError as error:
        _fatal("cannot read list file %s [%s]" % (list_name, error))
    return paths


def _fatal(message):
    _logging.critical(message)
    _sys.exit(1)


def _humanize_number(number):
    if number >= 1024 ** 5:
        return ("%.3f PiB" % (number / (1024.0 ** 5)))
    if number >= 1024 ** 4:
        return ("%.3f TiB" % (number / (1024.0 ** 4)))
    if number >= 1024 ** 3:
        return ("%.3f GiB" % (number / (1024.0 ** 3)))
    if number >= 1024 ** 2:
        return ("%.3f MiB" % (number / (1024.0 ** 2)))
    if number >= 1024:
        return ("%.3f KiB" % (number / 1024.0))
    return ("%d bytes" % number)


def main(args=None):
    # Remove user from logging output
    _logging.basicConfig(format='%(levelname)s:%(message)s')

    try:
        # Parse our argument list and get our list of pathnames
        options, paths = _parse_command_line(args)
        if options.list_file is not None:
            paths = read_path_list(options.list_file)
        elif not paths:
            # current directory is default
            paths = ["."]

        rat = Rationaliser(options)
        rat.run(paths)
    except MemoryError:
        _fatal("Out of memory")


if __name__ == '__main__':
    main()
