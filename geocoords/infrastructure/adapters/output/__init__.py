"""Output Adapters - implementações dos output ports"""
