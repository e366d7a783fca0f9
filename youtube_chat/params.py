"""Request parameters sent with every chat poll.

The page load hands over a client context (camelCase JSON); the poller
keeps it in a YoutubeParams, swaps the continuation token in after each
response and serializes it back for the next request. Nothing here is
consulted while decoding chat documents.
"""
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .primitives import I16, U16

logger = logging.getLogger(__name__)

DEFAULT_SCREEN_WIDTH = 401
DEFAULT_SCREEN_HEIGHT = 566
DEFAULT_PIXEL_DENSITY = 1
DEFAULT_SCREEN_DENSITY_FLOAT = 1.0
DEFAULT_UTC_OFFSET_MINUTES = 0
DEFAULT_INTERFACE_THEME = "USER_INTERFACE_THEME_LIGHT"
DEFAULT_TIME_ZONE = "Europe/London"


class ParamsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True, validate_assignment=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class MainAppWebInfo(ParamsModel):
    graft_url: str = ""


class CustomParam(ParamsModel):
    key: str
    value: str


class AdSignalsInfo(ParamsModel):
    params: list[CustomParam] = Field(default_factory=list)

    def add_param(self, key: str, value: str):
        self.params.append(CustomParam(key=key, value=value))

    def clear_params(self):
        self.params = []


class ClickTracking(ParamsModel):
    click_tracking_params: str


class UserParams(ParamsModel):
    pass


class WebClientInfo(ParamsModel):
    is_document_hidden: bool = False


def default_main_app_web_info() -> MainAppWebInfo:
    return MainAppWebInfo(graft_url="")


def default_ad_signals_info() -> AdSignalsInfo:
    return AdSignalsInfo(params=[])


class ClientParams(ParamsModel):
    hl: str
    gl: str
    visitor_data: str
    user_agent: str
    client_name: str
    client_version: str
    os_name: str
    os_version: str
    browser_name: str
    browser_version: str
    screen_width_points: U16 = DEFAULT_SCREEN_WIDTH
    screen_height_points: U16 = DEFAULT_SCREEN_HEIGHT
    screen_pixel_density: U16 = DEFAULT_PIXEL_DENSITY
    screen_density_float: float = DEFAULT_SCREEN_DENSITY_FLOAT
    utc_offset_minutes: I16 = DEFAULT_UTC_OFFSET_MINUTES
    user_interface_theme: str = DEFAULT_INTERFACE_THEME
    connection_type: Optional[str] = None
    main_app_web_info: MainAppWebInfo = Field(default_factory=default_main_app_web_info)
    time_zone: str = DEFAULT_TIME_ZONE


class RequestParams(ParamsModel):
    session_id: str
    internal_experiment_flags: list[str] = Field(default_factory=list)
    consistency_token_jars: list[str] = Field(default_factory=list)


class ParamsContext(ParamsModel):
    client: ClientParams
    request: RequestParams
    user: UserParams = Field(default_factory=UserParams)
    client_screen_nonce: Optional[str] = None
    click_tracking: Optional[ClickTracking] = None
    ad_signals_info: AdSignalsInfo = Field(default_factory=default_ad_signals_info)

    def update_event_id(self, event_id: Optional[str]):
        self.client_screen_nonce = event_id

    def update_referer(self, referer: str):
        self.client.main_app_web_info.graft_url = referer

    def set_connection_type(self, connection_type: Optional[str]):
        self.client.connection_type = connection_type

    def set_click_tracking(self, param: Optional[str]):
        self.click_tracking = ClickTracking(click_tracking_params=param) if param is not None else None

    @property
    def height(self) -> int:
        return self.client.screen_height_points

    @property
    def width(self) -> int:
        return self.client.screen_width_points

    @property
    def visitor_data(self) -> str:
        return self.client.visitor_data


class YoutubeParams(ParamsModel):
    context: ParamsContext
    continuation: str = ""
    web_client_info: WebClientInfo = Field(default_factory=WebClientInfo)

    def update_continuation(self, continuation: str):
        self.continuation = continuation

    def update_event_id(self, event_id: Optional[str]) -> "YoutubeParams":
        self.context.update_event_id(event_id)
        return self

    def update_referer(self, referer: str):
        self.context.update_referer(referer)


def new_params(context: ParamsContext) -> YoutubeParams:
    """Params for the first poll: no continuation yet, document visible."""
    logger.debug("New chat params for client %s %s", context.client.client_name, context.client.client_version)
    return YoutubeParams(context=context, continuation="", web_client_info=WebClientInfo(is_document_hidden=False))
