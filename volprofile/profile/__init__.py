"""
Volume profile aggregate, synthetic fallback generation and source loading.
"""
