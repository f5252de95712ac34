"""Process execution gateway.

Import from submodules:
- abc: SystemAction
- real: RealSystemAction
- fake: FakeSystemAction
- printing: PrintingSystemAction
- types: SystemActionOutput and the SystemActionFailure hierarchy
"""
