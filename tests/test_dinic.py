import pytest

from grafoalg.dinic import dinic, format_report, main
from grafoalg.edmonds_karp import edmonds_karp
from grafoalg.ford_fulkerson import ford_fulkerson
from grafoalg.network import SINK, SOURCE, NetworkError, parse_network

GRAPHS = [
    "st 7 END",
    "st -1 sa 2 sb 2 at 2 bt 2 ab 1 END",
    "st -1 sa 5 ab 5 bt 5 sc 3 ct 3 END",
    "st -1 sa 16 sb 13 ab 10 ba 4 ac 12 cb 9 bd 14 dc 7 ct 20 dt 4 END",
    "st -1 st 1 sa 1 at 1 END",
    "st -1 sb 2 END",
]


def _phases(text):
    names, edges = parse_network(text)
    return names, edges, dinic(len(names), edges)


@pytest.mark.parametrize("text", GRAPHS)
def test_agrees_with_other_algorithms_and_cut(text):
    names, edges, result = _phases(text)
    assert result.max_flow == edmonds_karp(len(names), edges).max_flow
    assert result.max_flow == ford_fulkerson(len(names), edges).max_flow
    assert sum(phase.total for phase in result.phases) == result.max_flow
    assert sum(step.amount for step in result.steps) == result.max_flow
    assert SOURCE in result.min_cut and SINK not in result.min_cut
    crossing = [
        c for u, v, c in edges if u in result.min_cut and v not in result.min_cut
    ]
    assert sum(crossing) == result.max_flow


@pytest.mark.parametrize("text", GRAPHS)
def test_phases_are_layered(text):
    _, _, result = _phases(text)
    previous = 0
    for phase in result.phases:
        assert (phase.nodes[0], phase.nodes[-1]) == (SOURCE, SINK)
        assert phase.steps
        (length,) = {len(step.path) for step in phase.steps}
        assert length > previous
        previous = length
        for step in phase.steps:
            assert step.path[-1] == (SINK, -1)
            assert {node for node, _ in step.path} <= set(phase.nodes)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("st -1 st 1 sa 1 at 1 END", [[0, 1], [0, 2, 1]]),
        ("st -1 sa 5 ab 5 bt 5 sc 3 ct 3 END", [[0, 2, 4, 1], [0, 2, 3, 1]]),
    ],
)
def test_phase_nodes(text, expected):
    assert [phase.nodes for phase in _phases(text)[2].phases] == expected


def test_unreachable_sink_has_no_phases():
    _, _, result = _phases("st -1 sb 2 END")
    assert (result.max_flow, result.phases, result.min_cut) == (0, [], [SOURCE, 2])


def test_single_node_is_rejected():
    with pytest.raises(NetworkError):
        dinic(1, [])


def test_format_report():
    names, _, result = _phases("st 7 END")
    assert format_report(names, result) == (
        "El MAX FLOW es de 7 considerando s como source y t como sink\n\n"
        "Los pasos a seguir para lograrlo son:\n\n"
        "   Network Auxiliar con los siguientes nodos:\n      s t \n"
        "   y con Greedy se resuelve con:\n"
        "      s t : 7\n"
        "   sumando 7 al flujo\n\n"
        "Ademas, el MIN CUT esta dado por:\n   s \n\n"
    )


def test_main_prints_phases(tmp_path, capsys):
    source = tmp_path / "flow.txt"
    source.write_text("st 7 END\n")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert "   sumando 7 al flujo\n" in out
    assert out.endswith("Ademas, el MIN CUT esta dado por:\n   s \n\n")


def test_main_rejects_bad_capacity(tmp_path, capsys):
    source = tmp_path / "flow.txt"
    source.write_text("st x END\n")
    assert main([str(source)]) == 1
    assert capsys.readouterr().err.startswith("error:")