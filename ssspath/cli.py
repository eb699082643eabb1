"""Command-line front end: read a graph, then answer find/write queries."""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TextIO

from .graph import Graph, read_graph

_PROG = "ssspath"


@dataclass(frozen=True)
class Command:
    """One query read from the input."""

    name: str
    source: int | None = None
    destination: int | None = None
    flag: int | None = None


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _integers(tokens: Iterator[str], count: int, name: str) -> list[int]:
    words = list(itertools.islice(tokens, count))
    if len(words) < count:
        raise ValueError(f"incomplete {name} command")
    try:
        return [int(word) for word in words]
    except ValueError as exc:
        raise ValueError(f"malformed {name} command") from exc


def parse_commands(stream: Iterable[str]) -> Iterator[Command]:
    """Yield commands from ``stream``; stops after ``stop``, skips unknown words."""
    tokens = _tokens(stream)
    for word in tokens:
        if word == "find":
            source, destination, flag = _integers(tokens, 3, "find")
            yield Command("find", source, destination, flag)
        elif word == "write":
            if next(tokens, None) is None:
                raise ValueError("incomplete write command")
            source, destination = _integers(tokens, 2, "write")
            yield Command("write", source, destination)
        elif word == "stop":
            yield Command("stop")
            return


def run_queries(graph: Graph, commands: Iterable[Command], out: TextIO | None = None) -> None:
    """Answer each command against ``graph``, writing reports to ``out``."""
    out = out if out is not None else sys.stdout
    current_source: int | None = None
    for command in commands:
        if command.name == "stop":
            out.write("Query: stop")
            return
        if current_source is None:
            current_source = command.source
        if command.name == "find":
            current_source = command.source
            out.write(
                f"Query: find {command.source} {command.destination} {command.flag}\n"
            )
            if (
                not graph.contains_vertex(command.source)
                or command.destination == command.source
                or command.flag not in (0, 1)
            ):
                out.write("Error: invalid find query\n")
            else:
                graph.find(command.source, command.destination, bool(command.flag))
        elif command.name == "write":
            source, destination = command.source, command.destination
            out.write(f"Query: write path {source} {destination}\n")
            if not graph.contains_vertex(source) or destination == source:
                out.write("Error: no path computation done\n")
            elif source != current_source or not graph.contains_vertex(destination):
                out.write("Error: invalid source destination pair\n")
            else:
                out.write(graph.describe_path(source, destination))


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {_PROG} <graph_file> <directed/undirected>")
        return 1
    filename, kind = args
    try:
        graph = read_graph(filename, kind == "directed")
    except OSError:
        print(f"Cannot open input graph file {filename}!")
        return 2
    except ValueError as exc:
        print(f"Malformed input graph file {filename}: {exc}")
        return 2
    run_queries(graph, parse_commands(sys.stdin), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())