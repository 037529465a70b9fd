"""
The CONTROLLER layer glues user input to the model.

It holds the recompute pass (controls + configuration -> design) and the
pointer interaction state machine. Neither depends on Qt.
"""
