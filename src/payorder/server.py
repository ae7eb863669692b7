#   Copyright 2026 UCP Authors
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

"""Payment order request server (Python/FastAPI)."""

import logging
import sys
from typing import Sequence

from absl import app as absl_app
from fastapi import FastAPI
from fastapi import Request
from fastapi.responses import JSONResponse
import uvicorn

from payorder import config
from payorder.exceptions import PayOrderError
from payorder.routes import router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Payment Order Request Service",
    version="0.1.0",
    description="Builds payment-order gateway requests from commerce orders",
)


@app.exception_handler(PayOrderError)
async def payorder_exception_handler(request: Request, exc: PayOrderError):
  """Converts payment order exceptions to JSON responses."""
  del request  # Unused.
  logger.warning("Request failed with %s: %s", exc.code, exc.message)
  return JSONResponse(
      status_code=exc.status_code,
      content={"detail": exc.message, "code": exc.code},
  )


app.include_router(router)


def main(argv: Sequence[str]) -> None:
  """Main entry point for the payment order server."""
  del argv  # Unused.

  if config.FLAGS.checkout_config_path is None:
    logger.error("--checkout_config_path must be provided.")
    print("\nUsage:")
    print(config.FLAGS.main_module_help())
    sys.exit(1)

  uvicorn.run(app, host="0.0.0.0", port=config.FLAGS.port)


def run() -> None:
  absl_app.run(main)


if __name__ == "__main__":
  run()
