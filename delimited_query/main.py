""" Entry point serving the demo API with uvicorn """

import uvicorn

from delimited_query.query_api import DelimitedQueryApi

# pylint: disable=invalid-name
app = DelimitedQueryApi

if __name__ == "__main__":  # pragma: no cover
    uvicorn.run("delimited_query.query_api:DelimitedQueryApi", host="0.0.0.0", port=8002,
                workers=1, factory=True)
