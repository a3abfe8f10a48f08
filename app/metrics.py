from prometheus_client import Counter

GRAPHQL_RESOLUTIONS = Counter(
    "graphql_resolutions_total",
    "Root query fields resolved",
    ["field", "outcome"],  # outcome: found | absent | listed
)
