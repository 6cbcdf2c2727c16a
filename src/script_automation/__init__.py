"""
Script Automation – narration scripts for faceless YouTube videos, generated with Gemini.

  import asyncio
  from script_automation.application.pipeline import ScriptPipeline
  from script_automation.adapters import default_adapters
  pipeline = ScriptPipeline(**default_adapters())
  asyncio.run(pipeline.generate_script("5 best hiking trails in Patagonia", "tutorial", "short"))
  print(pipeline.script or pipeline.error)

For another provider or front end: implement ports (e.g. IScriptGenerator) and inject.
"""

__version__ = "0.1.0"
