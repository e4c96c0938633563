from core import Portal, Direction, SEAMS
from cube_folders.affine import fold_positions
from cube_folders.portal_synthesis import match_edges, portals_from_matches, synthesize_from_vertices


def test_seams_use_every_boundary_edge_once(sample_net):
    pairs = match_edges(sample_net, fold_positions(sample_net))
    assert len(pairs) == SEAMS
    used = [edge for pair in pairs for edge in pair]
    assert sorted(used) == sorted(sample_net.boundary)


def test_glued_edges_run_opposite(sample_net):
    positions = fold_positions(sample_net)
    for first, second in match_edges(sample_net, positions):
        a, b = sample_net.edges[first], sample_net.edges[second]
        assert positions[a.start] == positions[b.end]
        assert positions[a.end] == positions[b.start]


def test_degenerate_vertices_do_not_match(sample_net):
    assert match_edges(sample_net, {corner: 0 for corner in range(len(sample_net.corners))}) is None


def test_direct_portal_followed_by_inverse(sample_net):
    pairs = match_edges(sample_net, fold_positions(sample_net))
    portals = portals_from_matches(sample_net, pairs)
    assert len(portals) == 2 * SEAMS
    for direct, inverse in zip(portals[::2], portals[1::2]):
        assert direct.inverse() == inverse


def test_sample_portals(sample_net):
    portals = {p.as_tuple() for p in synthesize_from_vertices(sample_net, fold_positions(sample_net))}
    # right side of the middle row glued to the top of the lower right face
    right = Portal((11, 7), (11, 4), Direction.RIGHT, (12, 8), (15, 8), Direction.DOWN)
    # bottom of the lower middle face glued to the bottom of the left face
    bottom = Portal((11, 11), (8, 11), Direction.DOWN, (0, 7), (3, 7), Direction.UP)
    for portal in (right, bottom):
        assert portal.as_tuple() in portals and portal.inverse().as_tuple() in portals
