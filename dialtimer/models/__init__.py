from dialtimer.models.entities import DialGeometry, DragSession, Point, PointerAction

__all__ = ["DialGeometry", "DragSession", "Point", "PointerAction"]
