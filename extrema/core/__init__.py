"""
Core: ordering capabilities, binary policies and the right-fold reduction.

Модули не зависят от внешних систем и не имеют состояния, кроме реестра
partially ordered типов.
"""
