# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod


class SourceHandler[T](metaclass=ABCMeta):
    """Something a conf can be read from."""

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError
