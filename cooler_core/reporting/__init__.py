from .cut_list import CutListGenerator

__all__ = ['CutListGenerator']
