"""Channel likelihood models.

Layers:
- models:    P(output | input) for deterministic, Gaussian-family, binary and composite channels
- analysis:  normalization checks, log-likelihood ratios, summary metrics
- utils:     numerics, tensor conversion, errors, logging, YAML configs
- reporting: run artifacts (results, figures, reports)
"""
