"""
Past exam questions: storage, lookup and aggregation.
"""
