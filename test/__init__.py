# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro
