# SPDX-License-Identifier: MIT

Bound = tuple[float, float]
