"""Channel models (likelihood core).

- Channel capability: probability_of(output, input)
- Deterministic: noiseless, shift
- Continuous noise: AWGN, AGN (non-zero mean), AGGN (generalized Gaussian)
- Discrete: binary symmetric channel
- Composite: per-input dispatch over shared sub-channels
- Factory: build channels from YAML config sections
"""
