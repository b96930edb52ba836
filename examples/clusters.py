from dotgraph import Graph, show

graph = Graph(graph_attr={"size": "4,4"}, node_attr={"shape": "box"})

main = graph.add_vertex("main")
parse = graph.add_vertex("parse")
execute = graph.add_vertex("execute")
init = graph.add_vertex("init")
cleanup = graph.add_vertex("cleanup")
make_string = graph.add_vertex("make a\nstring")
printf = graph.add_vertex("printf")
compare = graph.add_vertex("compare", style="filled", color=".7 .3 1.0")

graph.chain([main, parse, execute, compare], weight=8)
graph.add_edge(main, init, style="dotted")
graph.add_edge(main, cleanup)
graph.add_edge(execute, make_string)
graph.add_edge(execute, printf)
graph.add_edge(init, make_string)
graph.add_edge(main, printf, style="bold", label="100 times")

graph.add_cluster([parse, execute], label="front end", color="blue", node={"style": "filled"})
graph.add_subgraph([make_string, printf], edge={"color": "red"})

show(graph, "clusters")
