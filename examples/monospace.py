import logging
from typing import Iterable, List

from newbreak import Line, Linebreaker, Node


def main() -> None:
    "Print a paragraph, justified to a ragged-edged box of characters"
    logging.basicConfig(level=logging.INFO)
    breaker = Linebreaker(40, 44, 48)
    breaker.add_nodes(nodes(TEXT.split()))
    breaker.finalize()
    solution = breaker.compute_breaks(full_justify=True)
    if not solution.feasible:
        logging.warning("Could not set the paragraph within tolerance")
        return
    for line in solution:
        print(render(line))
    logging.info(
        "%d lines, badness %d (%r)",
        len(solution),
        solution.total_badness,
        breaker.cache,
    )


def nodes(words: Iterable[str]) -> List[Node]:
    ns: List[Node] = []
    for word in words:
        ns.append(Node.box(len(word), text=word, debug_text=word))
        # A space of one character may grow to three, but not shrink
        ns.append(Node.glue(1, 2, 0, text=" "))
    # Let the last line end short
    ns[-1].stretch = 1000
    return ns


def render(line: Line) -> str:
    out = []
    for n, width in zip(line.nodes, line.target_widths):
        out.append(n.text if n.text != " " else " " * round(width))
    return "".join(out).rstrip() + "|"


TEXT = """\
In my younger and more vulnerable years my father gave me some advice that
I've been turning over in my mind ever since. Whenever you feel like
criticizing any one, he told me, just remember that all the people in this
world haven't had the advantages that you've had. He didn't say any more but
we've always been unusually communicative in a reserved way, and I
understood that he meant a great deal more than that."""


if __name__ == "__main__":
    main()
