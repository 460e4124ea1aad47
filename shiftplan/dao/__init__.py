# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Data access layer: immutable entities, abstract DAOs and SQL implementations."""
