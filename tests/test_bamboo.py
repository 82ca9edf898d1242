import math

import pytest

from combalgs.bamboo import (
    DEFAULT_NODES,
    BambooController,
    BambooGardenTrimming,
    BambooNode,
    main,
)


def _default_nodes():
    return [BambooNode(distance, speed) for distance, speed in DEFAULT_NODES]


def test_node_grows_by_speed():
    node = BambooNode(5, 3)
    node.grow()
    node.grow()
    assert node.height == 2 * node.height_speed


def test_node_growth_truncates_to_whole_number():
    node = BambooNode(5, 3)
    node.grow(0.5)
    assert node.height == 1


def test_node_cut_resets_height():
    node = BambooNode(5, 3)
    node.grow()
    node.cut()
    assert node.height == 0


def test_limits_for_unit_node():
    garden = BambooGardenTrimming([BambooNode(1, 1)])
    assert garden.lower_limit == pytest.approx(1 + math.sqrt(2))
    assert garden.upper_limit == pytest.approx(3 + 2 * math.sqrt(2))


def test_limit_ratio_is_fixed():
    garden = BambooGardenTrimming(_default_nodes())
    assert garden.upper_limit / garden.lower_limit == pytest.approx(1 + math.sqrt(2))


def test_empty_garden_rejected():
    with pytest.raises(ValueError):
        BambooGardenTrimming([])


def test_original_nodes_are_copied():
    nodes = _default_nodes()
    garden = BambooGardenTrimming(nodes)
    garden.update()
    assert all(node.height == 0 for node in nodes)
    assert [n.height for n in garden.nodes] == [n.height_speed for n in nodes]


def test_growing_nodes_stay_below_request_limit():
    garden = BambooGardenTrimming(_default_nodes())
    for _ in range(4):
        garden.update()
    assert garden.requested == []
    assert garden.serviced is None
    assert [n.height for n in garden.nodes] == [4 * n.height_speed for n in garden.nodes]


def test_zero_speed_node_is_serviced_for_its_distance():
    garden = BambooGardenTrimming([BambooNode(4, 0)])
    garden.update()
    node = garden.nodes[0]
    assert garden.requested == [node]
    assert garden.serviced is node
    steps = 1
    while garden.serviced is not None:
        garden.update()
        steps += 1
    assert steps == node.distance
    assert garden.progress == 0
    assert garden.is_cut is False


def test_zero_speed_node_is_cut_half_way():
    garden = BambooGardenTrimming([BambooNode(4, 0)])
    node = garden.nodes[0]
    for _ in range(node.distance // 2):
        garden.update()
    assert garden.is_cut is True
    assert garden.progress == node.distance // 2


def test_controller_advances_garden():
    controller = BambooController(_default_nodes())
    controller.on_input()
    controller.on_input()
    assert [n.height for n in controller.garden.nodes] == [
        2 * n.height_speed for n in controller.garden.nodes
    ]


def test_main_prints_each_node(capsys):
    assert main(["3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(DEFAULT_NODES)
    assert all(line.startswith("distance=") for line in lines)


def test_main_rejects_bad_step_count(capsys):
    assert main(["many"]) == 1
    assert capsys.readouterr().out == ""