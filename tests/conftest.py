"""Shared fixtures: the puzzle example, folders and net layouts; --runslow option for long generated walks."""

import pytest
from numpy import full, int8

from core import FREE, VOID, Puzzle, parse_puzzle, extract_net
from cube_folders import get_folder


SAMPLE_TEXT = (
    "        ...#\n"
    "        .#..\n"
    "        #...\n"
    "        ....\n"
    "...#.......#\n"
    "........#...\n"
    "..#....#....\n"
    "..........#.\n"
    "        ...#....\n"
    "        .....#..\n"
    "        .#......\n"
    "        ......#.\n"
    "\n"
    "10R5L5R10L4R5L5\n"
)


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False,
        help="run slow tests (large generated nets)"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def layout_puzzle(layout, side=1, moves=()):
    """Stone-free puzzle with the given faces (side units) drawn on void"""
    width = (max(x for x, _ in layout) + 1) * side
    height = (max(y for _, y in layout) + 1) * side
    grid = full((height, width), VOID, dtype=int8)
    for x, y in layout:
        grid[y * side:(y + 1) * side, x * side:(x + 1) * side] = FREE
    return Puzzle(grid=grid, moves=tuple(moves))


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_puzzle():
    return parse_puzzle(SAMPLE_TEXT)


@pytest.fixture
def sample_net(sample_puzzle):
    return extract_net(sample_puzzle)


@pytest.fixture(scope="session")
def affine_folder():
    return get_folder('affine')


@pytest.fixture(scope="session")
def color_folder():
    return get_folder('colors')
