"""lazy_rpn/thunk.py - 延迟计算单元"""


class Lazy:
    """
    延迟执行的整数计算（thunk）。
    构造时不执行；每次调用都重新执行被包装的函数（不缓存结果），
    因此被包装函数中的副作用也会随每次调用重复发生。
    copy() 得到的新句柄与原句柄共享同一个底层计算。
    """

    def __init__(self, producer):
        if not callable(producer):
            raise TypeError(f"Lazy expects a callable, got {type(producer).__name__}")
        self._producer = producer

    @classmethod
    def constant(cls, value):
        """返回固定值的thunk"""
        return cls(lambda: value)

    def invoke(self):
        """立即执行并返回结果；异常（如除零）直接向上抛出"""
        return self._producer()

    def __call__(self):
        return self._producer()

    def copy(self):
        """浅拷贝：共享底层计算，不复制其状态"""
        return Lazy(self._producer)

    def shares_computation(self, other):
        return isinstance(other, Lazy) and other._producer is self._producer

    def __repr__(self):
        name = getattr(self._producer, '__qualname__', None) or type(self._producer).__name__
        return f"Lazy({name})"
