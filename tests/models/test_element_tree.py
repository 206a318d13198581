"""
Tests for the element tree nodes.

This module contains unit tests for Node, Paragraph, Heading, List and Table.
"""

import xml.etree.ElementTree as ET

import pytest

from odt_composer.models import (
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    Table,
    TableCell,
    TableRow,
)
from odt_composer.styles import StyleRegistry
from odt_composer.utils.enums import NodeKind, ValueType
from odt_composer.utils.odf_names import NODE_ELEMENT_NAMES


def emit(node):
    """Serialize a single node into a detached parent."""
    parent = ET.Element("office:text")
    node.to_xml(parent, StyleRegistry())
    return parent


def children(element, tag):
    """Return direct children with the given literal tag."""
    return [child for child in element if child.tag == tag]


def find_child(element, *path):
    """Follow the first child with each literal tag of path."""
    for tag in path:
        element = children(element, tag)[0]
    return element


class TestNode:
    """Test cases for Node class."""
    
    def test_append_returns_child(self):
        """Test that append returns the appended node."""
        root = Node()
        child = Paragraph("A")
        
        assert root.append(child) is child
        assert child.parent is root
        assert root.has_children()
        assert root.size() == 1
    
    def test_get_reads_without_mutating(self):
        """Test get and get_all."""
        root = Node()
        a, b = root.append(Paragraph("A")), root.append(Paragraph("B"))
        
        assert root.get(0) is a
        assert root.get(1) is b
        assert root.get(2) is None
        assert root.get(-1) is None
        assert root.get_all() == [a, b]
        assert root.size() == 2
    
    def test_get_all_returns_copy(self):
        """Test that modifying the returned list does not change the node."""
        root = Node()
        root.append(Paragraph("A"))
        
        children = root.get_all()
        children.clear()
        
        assert root.size() == 1
    
    def test_remove_at(self):
        """Test removing a child by position."""
        root = Node()
        a = root.append(Paragraph("A"))
        b = root.append(Paragraph("B"))
        
        removed = root.remove_at(0)
        
        assert removed is a
        assert a.parent is None
        assert root.get_all() == [b]
    
    def test_remove_at_out_of_range(self):
        """Test that out-of-range removal reports absence."""
        root = Node()
        root.append(Paragraph("A"))
        
        assert root.remove_at(1) is None
        assert root.remove_at(-1) is None
        assert root.size() == 1
    
    def test_remove_first_until_absent_clears(self):
        """Test the remove-first-until-absent idiom."""
        root = Node()
        children = [root.append(Paragraph(str(i))) for i in range(3)]
        
        while root.remove_at(0) is not None:
            pass
        
        assert not root.has_children()
        assert all(child.parent is None for child in children)
    
    def test_clear(self):
        """Test clear method."""
        root = Node()
        root.append(Paragraph("A"))
        root.append(Paragraph("B"))
        
        root.clear()
        
        assert root.size() == 0
    
    def test_append_moves_child_between_parents(self):
        """Test that a child is detached from its previous parent."""
        first, second = Node(), Node()
        child = first.append(Paragraph("A"))
        
        second.append(child)
        
        assert not first.has_children()
        assert second.get(0) is child
        assert child.parent is second
    
    def test_insert_clamps_position(self):
        """Test insertion positions outside the bounds."""
        root = Node()
        b = root.append(Paragraph("B"))
        a = root.insert(-5, Paragraph("A"))
        c = root.insert(99, Paragraph("C"))
        
        assert root.get_all() == [a, b, c]
    
    def test_append_self_raises(self):
        """Test that cycles are rejected."""
        root = Node()
        child = root.append(Node())
        
        with pytest.raises(ValueError):
            root.append(root)
        with pytest.raises(ValueError):
            child.append(root)
    
    def test_append_non_node_raises(self):
        """Test type check on append."""
        with pytest.raises(TypeError):
            Node().append("text")
    
    def test_element_names_are_total(self):
        """Test that every node kind maps to exactly one element name."""
        assert set(NODE_ELEMENT_NAMES) == set(NodeKind)
        assert len(set(NODE_ELEMENT_NAMES.values())) == len(NodeKind)


class TestTreeOrder:
    """Test cases for serialization order."""
    
    def test_children_serialize_in_append_order(self):
        """Test that A, B, C serialize as A, B, C and A, C after removing B."""
        root = Node()
        root.append(Paragraph("A"))
        root.append(Paragraph("B"))
        root.append(Paragraph("C"))
        
        element = emit(root)[0]
        assert [p.text for p in element] == ["A", "B", "C"]
        
        root.remove_at(1)
        element = emit(root)[0]
        assert [p.text for p in element] == ["A", "C"]


class TestParagraph:
    """Test cases for Paragraph and Heading."""
    
    def test_text_accessors(self):
        """Test add_text, set_text and get_text."""
        paragraph = Paragraph("Hello")
        paragraph.add_text(" world")
        
        assert paragraph.get_text() == "Hello world"
        
        paragraph.set_text("Bye")
        assert paragraph.get_text() == "Bye"
    
    def test_none_text_is_empty(self):
        """Test that a paragraph without text has empty text."""
        assert Paragraph().get_text() == ""
    
    def test_line_break_and_tab(self):
        """Test newline and tab encoding."""
        element = emit(Paragraph("a\nb\tc"))[0]
        
        assert element.tag == "text:p"
        assert element.text == "a"
        assert [child.tag for child in element] == ["text:line-break", "text:tab"]
        assert element[0].tail == "b"
        assert element[1].tail == "c"
    
    def test_space_runs(self):
        """Test that runs of spaces are written as text:s."""
        element = emit(Paragraph("a    b"))[0]
        
        assert element.text == "a "
        spaces = find_child(element, "text:s")
        assert spaces.get("text:c") == "3"
        assert spaces.tail == "b"
    
    def test_single_space_unchanged(self):
        """Test that single spaces stay plain text."""
        element = emit(Paragraph("a b c"))[0]
        
        assert element.text == "a b c"
        assert len(element) == 0
    
    def test_heading_level(self):
        """Test heading output."""
        element = emit(Heading("Title", 2))[0]
        
        assert element.tag == "text:h"
        assert element.get("text:outline-level") == "2"
        assert element.text == "Title"
    
    @pytest.mark.parametrize("level", [0, -1])
    def test_heading_invalid_level(self, level):
        """Test that heading levels below 1 are rejected."""
        with pytest.raises(ValueError):
            Heading("Title", level)


class TestList:
    """Test cases for List and ListItem."""
    
    def test_add_item_from_text(self):
        """Test adding items from strings."""
        items = List()
        items.add_item("One")
        items.add_item(Paragraph("Two"))
        
        assert items.size() == 2
        assert [item.get_text() for item in items.get_items()] == ["One", "Two"]
    
    def test_insert_and_remove_item(self):
        """Test insert_item and remove_item_at."""
        items = List()
        items.add_item("B")
        items.insert_item(0, "A")
        
        assert items.get_item(0).get_text() == "A"
        assert items.remove_item_at(5) is None
        assert items.remove_item_at(0).get_text() == "A"
        assert items.size() == 1
    
    def test_nested_list(self):
        """Test a list nested in an item."""
        items = List()
        item = items.add_item("Outer")
        nested = item.add_list()
        nested.add_item("Inner")
        
        element = emit(items)[0]
        
        assert element.tag == "text:list"
        inner = find_child(element, "text:list-item", "text:list", "text:list-item", "text:p")
        assert inner.text == "Inner"
        assert item.get_lists() == [nested]
    
    def test_empty_list_not_emitted(self):
        """Test that empty lists are suppressed."""
        parent = emit(List())
        
        assert len(parent) == 0
    
    def test_item_without_content(self):
        """Test an empty list item."""
        item = ListItem()
        
        assert item.get_paragraph() is None
        assert item.get_text() == ""


class TestTable:
    """Test cases for Table, TableRow and TableCell."""
    
    def test_columns_created(self):
        """Test that one column definition exists per column."""
        table = Table(3)
        
        assert table.num_cols == 3
        assert len(table.get_columns()) == 3
        assert table.get_column(3) is None
        assert not table.has_children()
    
    def test_negative_columns_rejected(self):
        """Test column count validation."""
        with pytest.raises(ValueError):
            Table(-1)
    
    def test_rows_and_cells(self):
        """Test row and cell accessors."""
        table = Table(2)
        row = table.add_row()
        row.add_cell("a")
        row.add_cell("b")
        
        assert table.get_row(0) is row
        assert table.get_row(1) is None
        assert [cell.get(0).get_text() for cell in row.get_cells()] == ["a", "b"]
        assert row.get_cell(1) is row.get_cells()[1]
        assert row.remove_cell_at(4) is None
    
    def test_table_without_rows_not_emitted(self):
        """Test empty table suppression."""
        assert len(emit(Table(2))) == 0
    
    def test_row_without_cells_not_emitted(self):
        """Test empty row suppression."""
        table = Table(2)
        table.add_row()
        filled = table.add_row()
        filled.add_cell("x")
        
        element = emit(table)[0]
        
        assert element.tag == "table:table"
        assert len(children(element, "table:table-row")) == 1
        assert len(children(element, "table:table-column")) == 2
    
    def test_columns_precede_rows(self):
        """Test that column definitions are written before the rows."""
        table = Table(1)
        table.add_row().add_cell("x")
        
        tags = [child.tag for child in emit(table)[0]]
        
        assert tags == ["table:table-column", "table:table-row"]
    
    def test_cell_value_type_written(self):
        """Test office:value-type on cells."""
        cell = TableCell("1.5", ValueType.FLOAT)
        row = TableRow()
        row.append(cell)
        
        element = emit(row)[0][0]
        
        assert element.get("office:value-type") == "float"
        assert find_child(element, "text:p").text == "1.5"
