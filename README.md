# advertrec

The request-handling layer of an advert recommendation service. It covers
advert plans, advert creatives, advert recommendations for a user, user
interest profiles and the log of user ad events. It also holds the service's
configuration.

Every handler returns a `Response` from `advertrec.common`. A `Response` has
these members:

- `code` is the status code.
- `message` is the status text.
- `data` is a dict that holds the payload.
- `ok` is true when the code is 200.
- Indexing reads the payload, so `resp["plan_id"]` is the same as `resp.data["plan_id"]`.

A call that works has code `200`, message `"success"`, and its payload fields
in `data`. A call that fails has an error code, the text of the exception the
store raised, and an empty payload. `get_ad_plan` and `get_ad_creative` give
`404` for any error. Every other handler gives `500`.

Timestamps come out as `YYYY-MM-DD HH:MM:SS` strings. A missing timestamp
comes out as `0001-01-01 00:00:00`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Configuration

```python
from advertrec.config import default_config, load_config

cfg = default_config()
print(cfg.server.host, cfg.server.port)        # 127.0.0.1 8888
print(cfg.database.dbname)                     # advert_recommend
print(cfg.recommend.collaborative_count)       # 5

cfg = load_config({"server": {"port": 9000}})
cfg = load_config('{"recommend": {"collaborativeCount": 8}}')
print(cfg.to_dict())
```

`Config` has three parts:

- `server` is a `ServerConfig` with `host` and `port`.
- `database` is a `DatabaseConfig` with `host`, `port`, `user`, `password`, `dbname` and `charset`.
- `recommend` is a `RecommendConfig` with `collaborative_count`.

`load_config` accepts a mapping or JSON text (`str` or `bytes`). The JSON uses
the sections `server`, `database` and `recommend`. In the `recommend` section
the key is `collaborativeCount`. Keys you leave out keep their defaults, and
unknown keys are ignored.

It raises `ValueError` in these cases:

- the JSON is not valid;
- the top level or a section is not an object;
- a value has the wrong type;
- `collaborativeCount` does not fit in 32 bits.

`Config.to_dict()` returns the configuration under the same JSON key names.

## Handlers

`RecommendService` in `advertrec.service` brings all the handlers together in
one object. You give it four store objects from your own storage layer.

```python
from advertrec.service import RecommendService

svc = RecommendService(plan_store, creative_store, interest_store, event_store)

resp = svc.create_ad_plan("Spring sale", "click", 10000.0, "CPC:0.5",
                          '{"region": ["north"]}',
                          "2024-01-01 00:00:00", "2024-03-31 23:59:59")
if resp.ok:
    print(resp["plan_id"])

svc.update_ad_plan(1, status=0)      # only fields that are not None are sent
svc.get_ad_plan(1)                   # data: ad_plan
svc.list_ad_plans(1, 10, None)       # data: ad_plans, total
svc.get_advert_recommend(1001)       # data: adverts, total
svc.add_user_interest(1001, "tech", 0.85)
svc.get_user_interests(1001)         # data: interests
```

Each group of handlers is a mixin class. To use a mixin on its own, put the
store on the attribute shown:

| Class | Module | Store attribute |
| --- | --- | --- |
| `AdPlanHandlers` | `advertrec.ad_plans` | `ad_plan_service` |
| `AdCreativeHandlers` | `advertrec.ad_creatives` | `ad_creative_service` |
| `UserAdEventHandlers` | `advertrec.user_events` | `ad_event_service` |
| `UserInterestHandlers` | `advertrec.user_interests` | `user_interest_service` |

### What the stores must provide

Each handler calls the store method that has its own name:

- plan store: `create_ad_plan`, `update_ad_plan(plan_id, updates)`,
  `get_ad_plan`, `list_ad_plans(page, page_size, status)`, `delete_ad_plan`
- creative store: `create_ad_creative`, `update_ad_creative(creative_id, updates)`,
  `get_ad_creative`, `list_ad_creatives(page, page_size, plan_id)`,
  `delete_ad_creative`, `get_advert_recommend(user_id)`
- event store: `create_ad_event`, `get_user_ad_events(user_id, page, page_size, event_type)`,
  `get_creative_ad_events(creative_id, page, page_size, event_type)`
- interest store: `add_user_interest`, `update_user_interest`,
  `get_user_interests`, `delete_user_interest`

The list, event and recommendation methods return a pair `(records, total)`.
`get_user_interests` returns only the records. Records are objects with
attributes. The converters `convert_ad_plan`, `convert_ad_creative`,
`convert_user_ad_event` and `convert_user_interest` turn them into the
`AdPlan`, `AdCreative`, `UserAdEvent` and `UserInterest` dataclasses that go
into responses. A creative record without a `weight` attribute gets a weight
of `0.0`.

The helpers in `advertrec.common` build responses:

- `success(**kwargs)` returns a successful response.
- `failure(code, message)` returns a failed one.
- `format_time(value)` formats a timestamp.

## What this package does not do

The package does not include these parts:

- a network server or RPC transport;
- a command to start the service;
- database storage;
- the recommendation algorithm.

The four stores you pass in do the storage and the recommending.
`DatabaseConfig` and `RecommendConfig` only hold settings for such stores.
Nothing in the package uses them.