"""
可验证公平的N招式剪刀石头布
Provably Fair N-Move Rock Paper Scissors
"""
__version__ = "0.1.0"
