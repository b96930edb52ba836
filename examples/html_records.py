from dotgraph import Graph, HTMLRecord, br, font, td, tr, write

graph = Graph()

table_attrs = {"border": 0, "cellborder": 1, "cellspacing": 0}

top = graph.add_html_record(
    HTMLRecord([tr([td("left", port="f0"), td("mid dle", port="f1"), td("right", port="f2")])], **table_attrs)
)
one_two = graph.add_html_record(HTMLRecord([tr([td("one", port="f0"), td("two", port="f1")])], **table_attrs))
hello = graph.add_html_record(
    HTMLRecord(
        [
            tr([
                td(["hello", br(), "world"], rowspan=3),
                td("b", colspan=3),
                td("g", rowspan=3),
                td(font("h", point_size=10, color="gray40"), rowspan=3),
            ]),
            tr([td("c"), td("d", port="here"), td("e")]),
            tr([td("f", colspan=3)]),
        ],
        **table_attrs,
    )
)

graph.add_edge((top, "f1"), (one_two, "f0"))
graph.add_edge((top, "f2"), (hello, "here"))

write(graph, "html_records")
