"""Logic of the selection: context of the selection sequence, driver and configuration"""
