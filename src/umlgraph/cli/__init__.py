# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for UMLGraph."""
