from string import Template

SEARCH_PAGE_SIZE = 100

REPO_SEARCH_QUERY = Template("""
query {
  rateLimit {
    cost
    remaining
    resetAt
  }
  search(query: "$expression", type: REPOSITORY, first: $first) {
    repositoryCount
    edges {
      node {
        ... on Repository {
          name
          nameWithOwner
          url
          homepageUrl
          description
          parent { nameWithOwner }
          languages(first: 5) { nodes { name } }
          releases(last: 1) { nodes { tagName } }
          forkCount
          stargazers { totalCount }
          diskUsage
          createdAt
          repositoryTopics(first: 10) { nodes { topic { name } } }
        }
      }
    }
  }
}
""")


def build_search_query(expression: str, first: int = SEARCH_PAGE_SIZE) -> str:
    # Embedded verbatim; no cursor, a single page only.
    return REPO_SEARCH_QUERY.substitute(expression=expression, first=first)
