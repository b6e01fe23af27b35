"""
Ядро cslist: грамматика, контракт элемента, обёртки и pydantic-адаптер.

Не зависит от внешних систем; единственный фреймворк сериализации — pydantic.
"""
