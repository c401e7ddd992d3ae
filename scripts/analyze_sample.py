import asyncio
import os
import sys

# Add project root to path so we can import babycry
sys.path.append(os.getcwd())

from babycry.config.settings import settings
from babycry.pipelines.cry import AudioAsset, classify_recording
from babycry.services import GeminiClient, InferenceError

async def main():
    client = GeminiClient.from_settings(settings.gemini)

    file_path = "test-audio.mp3"
    if len(sys.argv) > 1:
        file_path = sys.argv[1]
    region = sys.argv[2] if len(sys.argv) > 2 else "ID"

    if os.path.exists(file_path):
        print(f"Reading {file_path}...")
        with open(file_path, "rb") as f:
            audio_bytes = f.read()
    else:
        # No recording at hand: 1KB of silence still exercises the whole round trip.
        print(f"File '{file_path}' not found, sending 1KB of zeros instead.")
        print("Usage: python scripts/analyze_sample.py [path/to/audio.mp3] [US|ID]")
        audio_bytes = bytes(1024)

    asset = AudioAsset(data=audio_bytes, content_type=None, filename=os.path.basename(file_path))

    print(f"Classifying {len(audio_bytes)} bytes with {settings.gemini.model} (region={region})...")
    try:
        outcome = await classify_recording(asset, region, client)

        print(f"\n--- Result ({outcome.kind}) ---")
        print(outcome.to_payload())
        print("-------------------------")

    except InferenceError as e:
        print(f"\nInference Error: {e}")

if __name__ == "__main__":
    asyncio.run(main())
