"""
Infrastructure layer: concrete shared-cell arrays and their kernels.
"""
