"""Shared fixtures for dirstat tests."""

import os
import tempfile

# keep the trace log out of the user's default location during tests
os.environ.setdefault("DIRSTAT_LOG_PATH", os.path.join(tempfile.gettempdir(), "dirstat_tests.log"))

import pytest


def make_file(path, size):
    """Create a regular file of exactly size bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def scenario_tree(tmp_path):
    """
    root/
        a          4096 bytes
        b          100 bytes, second link at sub/b2
        sub/
            c      50 bytes
            b2     -> same inode as b
    """
    root = tmp_path / "root"
    make_file(root / "a", 4096)
    make_file(root / "b", 100)
    make_file(root / "sub" / "c", 50)
    os.link(root / "b", root / "sub" / "b2")
    return root


@pytest.fixture
def outside_tree(tmp_path):
    """
    outside/keep    123 bytes, three links: outside/keep, tree/one, tree/deep/two
    outside/alone   7 bytes, two links: outside/alone, tree/single
    tree/plain      10 bytes, one link
    """
    outside = tmp_path / "outside"
    tree = tmp_path / "tree"
    make_file(outside / "keep", 123)
    make_file(outside / "alone", 7)
    (tree / "deep").mkdir(parents=True)
    os.link(outside / "keep", tree / "one")
    os.link(outside / "keep", tree / "deep" / "two")
    os.link(outside / "alone", tree / "single")
    make_file(tree / "plain", 10)
    return tree


def per_directory_link_counts(output):
    """File link counts of every per-directory block in the printed report."""
    prefix = "  Total file links: "
    return [int(line[len(prefix):]) for line in output.splitlines() if line.startswith(prefix)]
