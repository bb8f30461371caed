"""Core modules of hydrostate.

This package contains the property engine:
- regions: region tags and input-pair kinds
- equations: IAPWS-IF97 region equations (wrapping ``iapws``)
- resolver: region resolution per input pair
- state: the immutable State and its factories
- dispatch: per-region property dispatch
- reference: IAPWS-95 comparison through CoolProp
- config: state point files (JSON)
"""
