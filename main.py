# main.py
"""
Quick demo: both folders on random nets, comparison of portal sets and times, then the puzzle example walked.
"""
from core import *
from cube_folders import *
from net_generator import *


EXAMPLE = """\
        ...#
        .#..
        #...
        ....
...#.......#
........#...
..#....#....
..........#.
        ...#....
        .....#..
        .#......
        ......#.

10R5L5R10L4R5L5
"""


def main():
    factory = NetFactory(seed=123)
    af_folder = get_folder('affine')
    cc_folder = get_folder('colors')

    n_iter = 20
    results = {}

    for i in range(n_iter):
        puzzle = factory(0)
        fold_af, time_af = af_folder(puzzle)
        fold_cc, time_cc = cc_folder(puzzle)
        results[i] = {
            'puzzle': puzzle,
            'affine': {'fold': fold_af, 'time': time_af},
            'colors': {'fold': fold_cc, 'time': time_cc},
        }

        filled = (i + 1) * 20 // n_iter
        print(f'\rProgress: [{"#" * filled}{"-" * (20-filled)}] {(i + 1) / n_iter:.0%}', end='', flush=True)

    print()
    print("Example net with portals: ")
    cprint(results[0]['puzzle'], results[0]['affine']['fold'], results[0]['affine']['time'])

    print("Times and agreement: ")
    print("   affine | colors        same   passwords")
    for i in range(n_iter):
        af = results[i]['affine']
        cc = results[i]['colors']
        puzzle = results[i]['puzzle']
        same = "yes" if af['fold'] == cc['fold'] else "NO"
        print(f"{af['time']:8.6f} | {cc['time']:8.6f}     {same:>4}   "
              f"{password(puzzle, af['fold'].portals):>6d} {password(puzzle, cc['fold'].portals):>6d}")

    print("\nPuzzle example: ")
    puzzle = parse_puzzle(EXAMPLE)
    walker = walk(puzzle, synthesize_portals(puzzle, 'colors'))
    grid_print(puzzle.grid, walker.visited)
    print(f"flat: {password(puzzle)}   cube: {walker.password}")


if __name__ == '__main__':
    main()
