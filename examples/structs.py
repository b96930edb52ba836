from dotgraph import Graph, Record, column, row, write

graph = Graph()

top = graph.add_record(Record([("f0", "left"), ("f1", "mid\\ dle"), ("f2", "right")]))
one_two = graph.add_record(Record([("f0", "one"), ("f1", "two")]))
hello = graph.add_record(
    Record([
        "hello\\nworld",
        column(["b", row(["c", ("here", "d"), "e"]), "f"]),
        "g",
        "h",
    ])
)

graph.add_edge((top, "f1"), (one_two, "f0"))
graph.add_edge((top, "f2"), (hello, "here"))

write(graph, "structs")
