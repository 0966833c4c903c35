"""Initialize the API system for the backend.

This module defines the Flask-RESTX API instance and all API endpoints
for the WS-Dottie proxy service. Every registered WSDOT / WSF endpoint is
exposed as GET /<api-name>/<function_name>, with its parameters taken from
the query string, so browser clients can reach the upstream APIs (which
send no CORS headers) through this server.
"""

from typing import get_args, get_origin

from flask_restx import Api, Namespace, Resource, reqparse

from wsdottie.core.cache import QueryCache
from wsdottie.core.errors import ErrorCode, ParseError, WsdotApiError
from wsdottie.core.fetch import to_jsonable
from wsdottie.endpoints import all_apis, endpoints_flat

# Initialize the Flask-RESTX API instance
# This provides Swagger/OpenAPI documentation and request parsing
api = Api(
    title="WS-Dottie API",
    description="JSON proxy for the WSDOT Traveler Information and WSF APIs",
    doc="/docs",
)

# Shared by every request; entries follow each endpoint's cache strategy
query_cache = QueryCache()


@api.errorhandler(WsdotApiError)
def handle_wsdot_api_error(error):
    """Map library errors to a JSON body: 400 for bad input, 502 otherwise."""
    status = 400 if error.code == ErrorCode.TRANSFORM_ERROR else 502
    print(f"[API] Status: Error - {error.code.value} - {error}")
    return error.to_dict(), status


@api.errorhandler(ParseError)
def handle_parse_error(error):
    print(f"[API] Status: Error - PARSE_ERROR - {error}")
    return {"error": "PARSE_ERROR", "message": str(error)}, 502


@api.route("/echo", endpoint="echo")
class Echo(Resource):
    """Test endpoint to verify the server is active and responding."""

    @api.response(200, "Success")
    def get(self):
        """Returns a simple 'Server Active' message.

        This is a health check endpoint that can be used to verify
        the API server is running and accessible.

        Returns:
            str: A simple "Server active!" message
        """
        print("[API] GET /echo - Request received")
        result = "Server active!"
        print(f"[API] GET /echo - Status: Success - Response: {result}")
        return result


@api.route("/up", endpoint="up")
class Up(Resource):
    """Health check endpoint for deployment monitoring."""

    @api.response(200, "Success")
    def get(self):
        """Returns a simple health check response.

        Returns:
            str: A simple ":)" message indicating the service is up
        """
        print("[API] GET /up - Request received")
        result = ":)"
        print(f"[API] GET /up - Status: Success - Response: {result}")
        return result


@api.route("/endpoints", endpoint="endpoints")
class Endpoints(Resource):
    """Catalog of every proxied endpoint."""

    parser = reqparse.RequestParser()
    parser.add_argument(
        "api",
        type=str,
        required=False,
        help="Only list endpoints of this API (e.g. 'wsf-vessels')",
        location="args",
    )

    @api.expect(parser)
    @api.response(200, "Success")
    def get(self):
        """Returns id, path, group and cache strategy of each endpoint."""
        args = self.parser.parse_args()
        api_name = args.get("api")
        print(f"[API] GET /endpoints - Request received - api: {api_name}")
        return [
            {
                "id": ep.id,
                "api": ep.api,
                "group": ep.group,
                "function_name": ep.function_name,
                "path": ep.path,
                "route": f"/{ep.api}/{ep.function_name}",
                "cache_strategy": ep.cache_strategy.value,
                "description": ep.description,
            }
            for ep in endpoints_flat()
            if api_name is None or ep.api == api_name
        ]


def _is_list_field(annotation) -> bool:
    if get_origin(annotation) is list:
        return True
    return any(get_origin(arg) is list for arg in get_args(annotation))


def build_parser(input_model):
    """Query-string parser mirroring the fields of an endpoint input model.

    Values stay strings (lists are split on commas); the input model coerces
    them when the request is fetched.
    """
    parser = reqparse.RequestParser()
    for name, info in input_model.model_fields.items():
        parser.add_argument(
            name,
            type=str,
            required=info.is_required(),
            action="split" if _is_list_field(info.annotation) else "store",
            help=info.description or f"{name} parameter",
            location="args",
        )
    return parser


def _make_resource(ns: Namespace, endpoint):
    parser = build_parser(endpoint.input_model)
    route = f"/{endpoint.api}/{endpoint.function_name}"

    class EndpointResource(Resource):
        @ns.expect(parser)
        @ns.response(200, "Success")
        @ns.response(400, "Validation Error")
        @ns.response(502, "Upstream Error")
        def get(self):
            print(f"[API] GET {route} - Request received")
            args = parser.parse_args()
            params = {k: v for k, v in args.items() if v is not None}
            print(f"[API] GET {route} - Status: Processing - params: {params}")
            result = query_cache.get(endpoint, params)
            print(f"[API] GET {route} - Status: Success")
            return to_jsonable(result)

    EndpointResource.__name__ = "".join(p.title() for p in endpoint.function_name.split("_"))
    EndpointResource.get.__doc__ = f"{endpoint.description}\n\nUpstream: GET {endpoint.path}"
    return EndpointResource


def register_endpoints(target: Api) -> None:
    """Add one namespace per API family and one route per endpoint."""
    for api_def in all_apis():
        ns = Namespace(api_def.name, description=api_def.title)
        for endpoint in api_def.resolve():
            ns.add_resource(
                _make_resource(ns, endpoint),
                f"/{endpoint.function_name}",
                endpoint=endpoint.id.replace(":", "_").replace("-", "_"),
            )
        target.add_namespace(ns)


register_endpoints(api)
