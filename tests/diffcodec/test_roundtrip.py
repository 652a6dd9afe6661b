"""
Parse-then-print round trips, plus a cross-check that printed output is
accepted by the python-patch library.
"""
import textwrap

import patch
import pytest

from diffcodec import parse_multi_file_diff, print_multi_file_diff

NO_NEWLINE = "\\ No newline at end of file"

GIT_DIFF = textwrap.dedent(f"""\
    diff --git a/file.txt b/file.txt
    index 3b18e51..a8f1e2b 100644
    --- a/file.txt
    +++ b/file.txt
    @@ -1,4 +1,4 @@ section heading
     one
    -two
    +TWO
     three
     four
    @@ -20,2 +20,3 @@
     twenty
     twenty-one
    +twenty-two
    diff --git a/run.sh b/run.sh
    old mode 100644
    new mode 100755
    diff --git a/old.txt b/new.txt
    similarity index 100%
    rename from old.txt
    rename to new.txt
    diff --git a/n.txt b/n.txt
    new file mode 100644
    index 0000000..ce01362
    --- /dev/null
    +++ b/n.txt
    @@ -0,0 +1,1 @@
    +hello
    {NO_NEWLINE}
    diff --git a/tail.txt b/tail.txt
    index 1111111..2222222 100644
    --- a/tail.txt
    +++ b/tail.txt
    @@ -1,2 +1,2 @@
     keep
    -old
    {NO_NEWLINE}
    +new
    {NO_NEWLINE}
    diff --git a/img.png b/img.png
    index 3333333..4444444 100644
    Binary files a/img.png and b/img.png differ
""").encode("utf-8")

GNU_DIFF = textwrap.dedent("""\
    diff -ruN a/x.txt b/x.txt
    --- a/x.txt\t2013-05-24 12:31:12.000000000 -0700
    +++ b/x.txt\t2013-05-24 12:31:13.000000000 -0700
    @@ -1,1 +1,1 @@
    -x
    +y
    Only in a: removed.txt
""").encode("utf-8")

QUOTED_DIFF = textwrap.dedent("""\
    diff --git "a/tab\\there" "b/tab\\there"
    index 1111111..2222222 100644
    --- "a/tab\\there"
    +++ "b/tab\\there"
    @@ -1,1 +1,1 @@
    -a
    +b
""").encode("utf-8")


@pytest.mark.parametrize("data", [GIT_DIFF, GNU_DIFF], ids=["git", "gnu"])
def test_parse_then_print_is_byte_identical(data):
    assert print_multi_file_diff(parse_multi_file_diff(data)) == data


def test_quoted_names_round_trip_with_quoting():
    diffs = parse_multi_file_diff(QUOTED_DIFF)
    assert diffs[0].orig_name == "a/tab\there"
    assert print_multi_file_diff(diffs, quote_names=True) == QUOTED_DIFF


def test_parse_print_parse_is_stable():
    once = parse_multi_file_diff(GIT_DIFF)
    twice = parse_multi_file_diff(print_multi_file_diff(once))
    assert once == twice


def test_printed_diff_is_accepted_by_python_patch():
    text = textwrap.dedent("""\
        --- a/file.txt
        +++ b/file.txt
        @@ -1,3 +1,3 @@
         one
        -two
        +TWO
         three
    """).encode("utf-8")
    printed = print_multi_file_diff(parse_multi_file_diff(text))

    patchset = patch.fromstring(printed)
    assert patchset
    assert len(patchset.items) == 1
    hunk = patchset.items[0].hunks[0]
    assert (hunk.startsrc, hunk.linessrc, hunk.starttgt, hunk.linestgt) == (1, 3, 1, 3)
