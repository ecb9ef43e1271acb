"""
PositiveEvenSetter: owner-gated positive even number registry.

- registry: in-process contract semantics (state, ownership, reverts, events)
- contracts: web3 binding for the deployed contract
"""
