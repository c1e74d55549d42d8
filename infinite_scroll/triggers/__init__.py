"""Edge triggers that call load_more() on a handle.

Import ``infinite_scroll.triggers.scroll_edge_trigger`` directly; it needs
PyGObject with GTK 4.
"""
