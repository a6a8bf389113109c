#
# This file is part of the fourcc project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import collections.abc
import typing

Union = typing.Union
Optional = typing.Optional
TypeAlias = typing.TypeAlias

CharType: TypeAlias = Union[str, bytes]

Iterator = collections.abc.Iterator
Sequence = collections.abc.Sequence
