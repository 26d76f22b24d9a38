from abc import ABC, abstractmethod
from typing import Dict, Any
from datetime import datetime, timezone
import uuid
import structlog

logger = structlog.get_logger()

class BaseAgent(ABC):
    unauthenticated_message = "You must be logged in."

    def __init__(self, name: str):
        self.name = name
        self.execution_id = str(uuid.uuid4())
        
    @abstractmethod
    async def execute(self, input_data: Dict[str, Any]) -> Any:
        """Execute the agent's main functionality"""
        pass
    
    async def run(self, input_data: Dict[str, Any]) -> Any:
        """Wrapper method that handles execution logging and timing"""
        start_time = datetime.now(timezone.utc)
        
        try:
            logger.info(f"Starting agent {self.name}", 
                       agent=self.name,
                       execution_id=self.execution_id)
            
            result = await self.execute(input_data)
            
            execution_time_ms = self._elapsed_ms(start_time)
            logger.info(f"Completed agent {self.name}", 
                       agent=self.name,
                       execution_id=self.execution_id,
                       execution_time_ms=execution_time_ms)
            
            return result
            
        except Exception as e:
            logger.error(f"Agent {self.name} failed", 
                        agent=self.name,
                        execution_id=self.execution_id,
                        error=str(e),
                        error_type=type(e).__name__,
                        execution_time_ms=self._elapsed_ms(start_time))
            raise
    
    def log(self, message: str, **kwargs):
        """Simple logging method for agents"""
        logger.info(message, agent=self.name, **kwargs)
    
    @staticmethod
    def _elapsed_ms(start_time: datetime) -> int:
        return int((datetime.now(timezone.utc) - start_time).total_seconds() * 1000)
