"""Bump-allocated heap, heap-size accounting, mark bookkeeping and object reference tracking."""