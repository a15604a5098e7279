# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import KeyValueCache

__all__ = ["KeyValueCache"]
