# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural UML model extraction from model-interchange documents."""
