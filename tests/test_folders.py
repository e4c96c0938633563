import pytest

from core import DUMMY_PUZZLE, Fold, NoFold, verify_portals, extract_net
from cube_folders import get_folder, synthesize_portals, folder_registry, FoldingError
from cube_folders.affine import AffineFolder
from cube_folders.colors import ColorFolder
from net_generator import all_layouts
from conftest import layout_puzzle


def test_registry_names():
    assert folder_registry['affine'] is AffineFolder
    assert folder_registry['af'] is AffineFolder
    assert folder_registry['colors'] is ColorFolder
    assert folder_registry['cc'] is ColorFolder


def test_get_folder(capsys):
    folder = get_folder('cc')
    assert isinstance(folder, ColorFolder)
    assert "Successfully initialized colors folder" in capsys.readouterr().out


def test_unknown_folder():
    with pytest.raises(ValueError):
        get_folder('origami')
    with pytest.raises(ValueError):
        synthesize_portals(DUMMY_PUZZLE, 'origami')


def test_unexpected_kwarg(affine_folder):
    with pytest.raises(TypeError):
        affine_folder(DUMMY_PUZZLE, max_rounds=3)


def test_kwarg_types(color_folder):
    with pytest.raises(TypeError):
        color_folder(DUMMY_PUZZLE, max_rounds='many')
    with pytest.raises(TypeError):
        color_folder(DUMMY_PUZZLE, strict='yes')
    fold, _ = color_folder(DUMMY_PUZZLE, max_rounds='5')
    assert len(fold) == 14


def test_float_kwarg_truncated(color_folder):
    with pytest.warns(UserWarning):
        fold, _ = color_folder(DUMMY_PUZZLE, max_rounds=4.5)
    assert not isinstance(fold, NoFold)


def test_solve_iter(affine_folder, sample_puzzle):
    folds, times = affine_folder.solve_iter([sample_puzzle, DUMMY_PUZZLE])
    assert len(folds) == len(times) == 2
    assert all(isinstance(fold, Fold) and not isinstance(fold, NoFold) for fold in folds)


def test_strict_mode(affine_folder):
    puzzle = layout_puzzle([(x, y) for x in range(3) for y in range(2)])
    fold, _ = affine_folder(puzzle)
    assert isinstance(fold, NoFold)
    assert "could not place" in fold.reason
    with pytest.raises(FoldingError):
        affine_folder.s(puzzle, strict=True)


def test_not_a_net_fails_closed():
    puzzle = layout_puzzle([(0, 0), (0, 1), (1, 1), (2, 1), (3, 1)])
    assert synthesize_portals(puzzle, 'affine') is None
    assert synthesize_portals(puzzle, 'colors') is None


def test_layouts_count():
    assert len(all_layouts()) == 64


@pytest.mark.parametrize('side', [1, 3])
def test_methods_agree_on_every_layout(affine_folder, color_folder, side):
    for layout in all_layouts():
        puzzle = layout_puzzle(layout, side=side)
        fold_af, _ = affine_folder(puzzle, strict=True)
        fold_cc, _ = color_folder(puzzle, strict=True)
        assert fold_af == fold_cc
        assert fold_af.vertices is not None and fold_cc.vertices is not None
        assert verify_portals(puzzle, fold_af)


@pytest.mark.parametrize('folder_class', [AffineFolder, ColorFolder])
def test_declared_kwargs_are_bool_or_int(folder_class):
    assert set(folder_class._allowed_kwargs.values()) <= {bool, int}


def test_kwargs_not_coerced_from_other_types(color_folder):
    with pytest.raises(TypeError):
        color_folder(DUMMY_PUZZLE, strict=1.0)
    with pytest.raises(TypeError):
        color_folder(DUMMY_PUZZLE, max_rounds=[5])
    with pytest.raises(TypeError):
        color_folder(DUMMY_PUZZLE, max_rounds=(5,))


@pytest.mark.parametrize('method', ['affine', 'colors'])
def test_repeated_runs_are_identical(method):
    for layout in all_layouts():
        puzzle = layout_puzzle(layout, side=2)
        first = synthesize_portals(puzzle.copy(), method)
        second = synthesize_portals(puzzle.copy(), method)
        assert [p.as_tuple() for p in first] == [p.as_tuple() for p in second]
        assert extract_net(puzzle) == extract_net(puzzle.copy())
