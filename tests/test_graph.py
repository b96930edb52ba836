import unittest

from dotgraph import (
    UNSET,
    AttributeList,
    EdgeNotFoundError,
    Graph,
    SubgraphMembershipError,
    SubgraphNotFoundError,
    VertexNotFoundError,
)


class AttributeListTest(unittest.TestCase):
    def test_update_keeps_position(self):
        attrs = AttributeList({"color": "blue", "shape": "box"})
        attrs["color"] = "red"
        self.assertEqual(list(attrs.items()), [("color", "red"), ("shape", "box")])

    def test_unset_removes(self):
        attrs = AttributeList(color="blue", shape="box")
        attrs["color"] = UNSET
        attrs.update(shape=None)
        self.assertEqual(len(attrs), 0)
        attrs["missing"] = UNSET
        self.assertNotIn("missing", attrs)

    def test_prepend(self):
        attrs = AttributeList(color="blue", label="old")
        attrs.prepend("label", "new")
        self.assertEqual(list(attrs.items()), [("label", "new"), ("color", "blue")])


class GraphTest(unittest.TestCase):
    def setUp(self):
        self.graph = Graph()

    def test_vertex_ids(self):
        self.assertEqual(self.graph.add_vertex("a"), 0)
        self.assertEqual(self.graph.add_vertex("b"), 1)
        self.assertEqual(self.graph.add_vertex("c"), 2)

    def test_label_comes_first(self):
        vid = self.graph.add_vertex("hello", color="blue", shape="box")
        self.assertEqual(
            list(self.graph.find_vertex(vid).attrs.items()),
            [("label", "hello"), ("color", "blue"), ("shape", "box")],
        )
        self.assertEqual(self.graph.find_vertex(vid).label, "hello")

    def test_edge_ids_are_independent(self):
        a = self.graph.add_vertex("a")
        b = self.graph.add_vertex("b")
        self.assertEqual(self.graph.add_edge(a, b), 0)
        self.assertEqual(self.graph.add_vertex("c"), 2)
        self.assertEqual(self.graph.add_edge(b, a), 1)

    def test_edge_ports(self):
        a = self.graph.add_vertex("a")
        b = self.graph.add_vertex("b")
        eid = self.graph.add_edge((a, "f0"), (b, "f1"), color="green")
        edge = self.graph.find_edge(eid)
        self.assertEqual((edge.tail, edge.tail_port, edge.head, edge.head_port), (a, "f0", b, "f1"))
        self.assertEqual(dict(edge.attrs), {"color": "green"})

    def test_edge_to_unknown_vertex(self):
        a = self.graph.add_vertex("a")
        with self.assertRaises(VertexNotFoundError):
            self.graph.add_edge(a, 7)
        with self.assertRaises(VertexNotFoundError):
            self.graph.add_edge((9, "port"), a)
        self.assertEqual(self.graph.edges, [])

    def test_chain(self):
        ids = [self.graph.add_vertex(label) for label in "abcd"]
        eids = self.graph.chain(ids, style="dotted")
        self.assertEqual(eids, [0, 1, 2])
        self.assertEqual([(e.tail, e.head) for e in self.graph.edges], [(0, 1), (1, 2), (2, 3)])
        self.assertEqual(self.graph.chain(ids[:1]), [])

    def test_fan_out(self):
        a, b, c = (self.graph.add_vertex(label) for label in "abc")
        eids = self.graph.fan_out(a, [b, (c, "p")], color="red")
        self.assertEqual(eids, [0, 1])
        self.assertEqual(
            [(e.tail, e.head, e.head_port) for e in self.graph.edges],
            [(a, b, None), (a, c, "p")],
        )
        self.assertEqual(self.graph.find_edge(1).attrs, {"color": "red"})
        self.assertEqual(self.graph.fan_out(a, []), [])

    def test_fan_out_to_unknown_vertex_adds_nothing(self):
        a = self.graph.add_vertex("a")
        b = self.graph.add_vertex("b")
        with self.assertRaises(VertexNotFoundError):
            self.graph.fan_out(a, [b, 5])
        self.assertEqual(self.graph.edges, [])

    def test_vertex_label_is_required(self):
        for label in (None, UNSET):
            with self.assertRaises(ValueError):
                self.graph.add_vertex(label)
        self.assertEqual(self.graph.vertices, [])
        self.assertEqual(self.graph.add_vertex("a"), 0)

    def test_subgraph_ids(self):
        a = self.graph.add_vertex("a")
        b = self.graph.add_vertex("b")
        c = self.graph.add_vertex("c")
        self.assertEqual(self.graph.add_subgraph([a], node={"shape": "triangle"}), "subgraph0")
        self.assertEqual(self.graph.add_cluster([b], color="blue"), "cluster1")
        self.assertEqual(self.graph.add_subgraph([c]), "subgraph2")

    def test_subgraph_properties_split(self):
        a = self.graph.add_vertex("a")
        sid = self.graph.add_cluster([a], color="blue", label="c", node={"shape": "box"}, edge={"style": "dotted"})
        subgraph = self.graph.find_subgraph(sid)
        self.assertTrue(subgraph.is_cluster)
        self.assertEqual(dict(subgraph.node_attrs), {"shape": "box"})
        self.assertEqual(dict(subgraph.edge_attrs), {"style": "dotted"})
        self.assertEqual(list(subgraph.subgraph_properties.items()), [("color", "blue"), ("label", "c")])

    def test_subgraph_with_unknown_vertex(self):
        with self.assertRaises(VertexNotFoundError):
            self.graph.add_subgraph([3])
        self.assertEqual(self.graph.subgraphs, [])

    def test_overlapping_subgraphs_are_rejected(self):
        a = self.graph.add_vertex("a")
        b = self.graph.add_vertex("b")
        sid = self.graph.add_cluster([a])
        with self.assertRaises(SubgraphMembershipError):
            self.graph.add_subgraph([a, b])
        other = self.graph.add_subgraph([b])
        with self.assertRaises(SubgraphMembershipError):
            self.graph.add_to_subgraph(sid, [b])
        self.graph.remove_from_subgraph(other, [b])
        self.graph.add_to_subgraph(sid, [b])
        self.assertEqual(self.graph.find_subgraph(sid).vertex_ids, [a, b])

    def test_set_graph_property(self):
        self.graph.set_graph_property("rankdir", "RL")
        self.graph.set_graph_property("size", "4,4")
        self.graph.set_graph_property("rankdir", "LR")
        self.assertEqual(list(self.graph.graph_attr.items()), [("rankdir", "LR"), ("size", "4,4")])
        self.graph.set_graph_property("rankdir", UNSET)
        self.assertEqual(dict(self.graph.graph_attr), {"size": "4,4"})

    def test_set_global_properties(self):
        self.graph.set_global_properties("node", shape="triangle", color="blue")
        self.graph.set_global_properties("edge", style="dotted")
        self.graph.set_global_properties("node", shape=None)
        self.assertEqual(dict(self.graph.node_attr), {"color": "blue"})
        self.assertEqual(dict(self.graph.edge_attr), {"style": "dotted"})
        with self.assertRaises(ValueError):
            self.graph.set_global_properties("graph", size="4,4")

    def test_find_returns_none(self):
        self.assertIsNone(self.graph.find_vertex(0))
        self.assertIsNone(self.graph.find_edge(0))
        self.assertIsNone(self.graph.find_subgraph("cluster0"))

    def test_update_vertex(self):
        vid = self.graph.add_vertex("a", color="blue")
        self.graph.update_vertex(vid, shape="triangle", color=None)
        self.assertEqual(list(self.graph.find_vertex(vid).attrs.items()), [("label", "a"), ("shape", "triangle")])
        with self.assertRaises(VertexNotFoundError):
            self.graph.update_vertex(5, color="red")

    def test_update_edge(self):
        a = self.graph.add_vertex("a")
        b = self.graph.add_vertex("b")
        eid = self.graph.add_edge((a, "p"), b, weight=8)
        self.graph.update_edge(eid, style="dotted", outport=UNSET, inport="q")
        edge = self.graph.find_edge(eid)
        self.assertEqual((edge.tail_port, edge.head_port), (None, "q"))
        self.assertEqual(list(edge.attrs.items()), [("weight", 8), ("style", "dotted")])
        with self.assertRaises(EdgeNotFoundError):
            self.graph.update_edge(3, color="red")

    def test_update_subgraph(self):
        a = self.graph.add_vertex("a")
        sid = self.graph.add_cluster([a], color="blue")
        self.graph.update_subgraph(sid, color=UNSET, label="x", node={"shape": "box"})
        subgraph = self.graph.find_subgraph(sid)
        self.assertEqual(dict(subgraph.subgraph_properties), {"label": "x"})
        self.assertEqual(dict(subgraph.node_attrs), {"shape": "box"})
        with self.assertRaises(SubgraphNotFoundError):
            self.graph.update_subgraph("cluster9", color="red")

    def test_update_subgraph_clears_layers(self):
        a = self.graph.add_vertex("a")
        sid = self.graph.add_subgraph([a], node={"shape": "box"}, edge={"color": "red"})
        self.graph.update_subgraph(sid, node=UNSET, edge=None)
        subgraph = self.graph.find_subgraph(sid)
        self.assertEqual(dict(subgraph.node_attrs), {})
        self.assertEqual(dict(subgraph.edge_attrs), {})
        with self.assertRaises(ValueError):
            self.graph.update_subgraph(sid, node="box")

    def test_remove_vertex(self):
        a = self.graph.add_vertex("a")
        b = self.graph.add_vertex("b")
        c = self.graph.add_vertex("c")
        self.graph.add_edge(a, b)
        keep = self.graph.add_edge(b, c)
        self.graph.add_edge(c, a)
        sid = self.graph.add_cluster([a, c])
        self.graph.remove_vertex(a)
        self.assertIsNone(self.graph.find_vertex(a))
        self.assertEqual([e.id for e in self.graph.edges], [keep])
        self.assertEqual(self.graph.find_subgraph(sid).vertex_ids, [c])
        self.assertEqual(self.graph.add_vertex("d"), 3)
        with self.assertRaises(VertexNotFoundError):
            self.graph.remove_vertex(a)

    def test_remove_edge(self):
        a = self.graph.add_vertex("a")
        eid = self.graph.add_edge(a, a)
        self.graph.remove_edge(eid)
        self.assertIsNone(self.graph.find_edge(eid))
        self.assertEqual(self.graph.add_edge(a, a), 1)
        with self.assertRaises(EdgeNotFoundError):
            self.graph.remove_edge(eid)

    def test_remove_subgraph(self):
        a = self.graph.add_vertex("a")
        sid = self.graph.add_cluster([a], label="x")
        self.graph.remove_subgraph(sid)
        self.assertEqual(self.graph.subgraphs, [])
        self.assertEqual(self.graph.to_dot(), 'digraph G {\n\n  v0 [label="a"]\n\n}')
        self.assertEqual(self.graph.add_subgraph([a]), "subgraph1")
        with self.assertRaises(SubgraphNotFoundError):
            self.graph.remove_subgraph(sid)

    def test_not_found_errors_are_key_errors(self):
        with self.assertRaises(KeyError):
            self.graph.remove_vertex(0)
        self.assertEqual(str(VertexNotFoundError(4)), "vertex 4 not found")
