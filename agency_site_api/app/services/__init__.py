"""
Service layer.

Each service class encapsulates the queries, aggregations and mutations
for one domain.  Endpoints only translate HTTP concerns (status codes,
authorization) and delegate everything else here.
"""
